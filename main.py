import hmac
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import BackgroundTasks, Depends, FastAPI, Header, HTTPException, Response
from pydantic import BaseModel

from alerts import send_high_priority_alert
from config import QUEUE_PEEK_LIMIT, get_admin_api_key
from knowledge_base import EntryNotFound, InvalidEntry, knowledge_base
from priority import Priority, detect_priority, matched_keyword
from queue_manager import request_queue

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [kbdesk] %(levelname)s %(message)s",
)
log = logging.getLogger(__name__)

app = FastAPI(title="KBDesk", description="Customer service knowledge base and request triage API")


class ClassifyRequest(BaseModel):
    text: str


class CustomerRequest(BaseModel):
    id: str
    question: str


class EntryPayload(BaseModel):
    question: str
    answer: str


def require_admin(x_admin_key: Optional[str] = Header(default=None)):
    """Only callers presenting the configured admin key may manage Q&A pairs."""
    if not x_admin_key:
        raise HTTPException(status_code=401, detail="Admin key required")
    expected = get_admin_api_key()
    if not expected or not hmac.compare_digest(x_admin_key.encode(), expected.encode()):
        raise HTTPException(status_code=403, detail="Admin role required")


@app.get("/")
def index():
    return {
        "message": "KBDesk customer service API",
        "endpoints": {
            "health": "GET /health",
            "classify": "POST /classify",
            "submit_request": "POST /request",
            "view_queue": "GET /queue",
            "next_request": "GET /request/next",
            "knowledge_base": "GET|POST /knowledge-base, GET|PUT|DELETE /knowledge-base/{id}",
        },
    }


@app.get("/health")
def health():
    return {
        "status": "ok",
        "queue_size": request_queue.get_queue_size(),
        "kb_entries": knowledge_base.count(),
    }


@app.post("/classify")
def classify_text(body: ClassifyRequest):
    return {"priority": detect_priority(body.text).value}


@app.post("/request", status_code=202)
def submit_request(body: CustomerRequest, background_tasks: BackgroundTasks):
    if not body.question.strip():
        raise HTTPException(status_code=400, detail="'question' must not be empty")

    priority, keyword = matched_keyword(body.question)
    request_data = {
        "id": body.id,
        "question": body.question,
        "priority": priority.value,
        "matched_keyword": keyword,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    request_queue.add_request(request_data)

    if priority is Priority.HIGH:
        log.warning("HIGH PRIORITY [%s] (keyword=%r) %s", body.id, keyword, body.question[:120])
        background_tasks.add_task(send_high_priority_alert, request_data)
    else:
        log.info("Queued request [%s] -> %s", body.id, priority.value)

    return {"status": "accepted", "request_id": body.id, "priority": priority.value}


@app.get("/queue")
def view_queue(limit: int = 10):
    limit = min(max(limit, 1), QUEUE_PEEK_LIMIT)
    return {
        "queue_size": request_queue.get_queue_size(),
        "requests": request_queue.peek_queue(limit),
    }


@app.get("/request/next")
def next_request():
    request_data = request_queue.get_next_request()
    if request_data is None:
        raise HTTPException(status_code=404, detail="Queue is empty")
    return request_data


@app.get("/knowledge-base", dependencies=[Depends(require_admin)])
def list_entries(q: Optional[str] = None):
    if q:
        return knowledge_base.search(q)
    return knowledge_base.get_all()


@app.get("/knowledge-base/{entry_id}", dependencies=[Depends(require_admin)])
def get_entry(entry_id: int):
    try:
        return knowledge_base.get(entry_id)
    except EntryNotFound:
        raise HTTPException(status_code=404, detail=f"Q&A pair {entry_id} not found")


@app.post("/knowledge-base", status_code=201, dependencies=[Depends(require_admin)])
def create_entry(body: EntryPayload):
    try:
        return knowledge_base.create(body.question, body.answer)
    except InvalidEntry as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.put("/knowledge-base/{entry_id}", dependencies=[Depends(require_admin)])
def update_entry(entry_id: int, body: EntryPayload):
    try:
        return knowledge_base.update(entry_id, body.question, body.answer)
    except InvalidEntry as e:
        raise HTTPException(status_code=400, detail=str(e))
    except EntryNotFound:
        raise HTTPException(status_code=404, detail=f"Q&A pair {entry_id} not found")


@app.delete("/knowledge-base/{entry_id}", status_code=204, dependencies=[Depends(require_admin)])
def delete_entry(entry_id: int):
    try:
        knowledge_base.delete(entry_id)
    except EntryNotFound:
        raise HTTPException(status_code=404, detail=f"Q&A pair {entry_id} not found")
    return Response(status_code=204)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=False)
