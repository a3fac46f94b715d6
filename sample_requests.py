"""
KBDesk sample script: sends example customer questions and prints the labels.
Run: python sample_requests.py

Requires the API running on :8000
    uvicorn main:app --host 0.0.0.0 --port 8000
"""
import time

import requests

API_URL = "http://localhost:8000"

REQUESTS = [
    {"id": "R001", "question": "The app is broken and urgent", "expected": "high"},
    {"id": "R002", "question": "I need help with a question", "expected": "medium"},
    {"id": "R003", "question": "What are your business hours?", "expected": "low"},
    {"id": "R004", "question": "CRITICAL: system down", "expected": "high"},
    {"id": "R005", "question": "Checkout fails with an error every time I pay.", "expected": "high"},
    {"id": "R006", "question": "I have a concern about my subscription renewal.", "expected": "medium"},
    {"id": "R007", "question": "The system reissued the ticket", "expected": "medium"},
    {"id": "R008", "question": "Do you ship to Canada?", "expected": "low"},
]

RESET  = "\033[0m"
GREEN  = "\033[92m"
RED    = "\033[91m"
YELLOW = "\033[93m"
BOLD   = "\033[1m"


def main():
    print(f"\n{BOLD}{'='*65}{RESET}")
    print(f"{BOLD}  KBDesk — {len(REQUESTS)} Request Priority Run{RESET}")
    print(f"{BOLD}{'='*65}{RESET}\n")

    passed = 0
    for r in REQUESTS:
        resp = requests.post(
            f"{API_URL}/request",
            json={"id": r["id"], "question": r["question"]},
            timeout=10,
        )
        if resp.status_code != 202:
            print(f"{RED}[{r['id']}] HTTP {resp.status_code} — server error!{RESET}\n")
            continue

        priority = resp.json().get("priority", "?")
        ok = priority == r["expected"]
        if ok:
            passed += 1
        mark = f"{GREEN}✅{RESET}" if ok else f"{RED}❌{RESET}"

        print(f"{BOLD}[{r['id']}]{RESET} {r['question'][:65]}")
        print(f"  Priority : {mark} got={BOLD}{priority}{RESET}  expected={r['expected']}")
        print()
        time.sleep(0.1)

    print(f"{BOLD}{'='*65}{RESET}")
    result_color = GREEN if passed == len(REQUESTS) else YELLOW
    print(f"  Result: {result_color}{passed}/{len(REQUESTS)} matched{RESET}")
    print(f"{BOLD}{'='*65}{RESET}\n")


if __name__ == "__main__":
    main()
