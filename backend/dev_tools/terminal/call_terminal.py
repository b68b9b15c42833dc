import argparse
import os
import sys
from datetime import datetime

import requests

from app.core.phone import is_valid_phone_number

API = os.environ.get("HACKER_CALL_API", "http://localhost:3000")


def log(level, msg):
    print(f"{datetime.now().strftime('%H:%M:%S')} [{level}] {msg}")


def place_call(api, number):
    if not is_valid_phone_number(number):
        log("ERROR", "Invalid format. Use +91XXXXXXXXXX")
        return None

    log("INFO", "Requesting call...")
    try:
        r = requests.post(f"{api}/call", json={"number": number}, timeout=15)
        data = r.json()
    except (requests.RequestException, ValueError) as exc:
        log("ERROR", f"Network error: {exc}")
        return None

    if data.get("success"):
        log("OK", f"Call SID: {data['callSid']} (callId {data.get('callId', '-')})")
        return data["callSid"]

    log("ERROR", data.get("error") or "Unknown error")
    return None


def hangup(api, call_sid):
    log("INFO", "Ending call...")
    try:
        r = requests.delete(f"{api}/hangup/{call_sid}", timeout=15)
    except requests.RequestException as exc:
        log("ERROR", f"Hangup error: {exc}")
        return False

    if r.ok:
        log("OK", "Call hung up successfully")
        return True
    log("ERROR", f"Failed to hang up: {r.text}")
    return False


def fetch_token(api):
    try:
        r = requests.get(f"{api}/token", timeout=15)
        data = r.json()
    except (requests.RequestException, ValueError) as exc:
        log("ERROR", f"Network error: {exc}")
        return False

    if "token" not in data:
        log("ERROR", data.get("error") or "Unknown error")
        return False
    log("OK", f"identity={data['identity']}")
    print(data["token"])
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(description="Hacker Call Terminal")
    parser.add_argument("--api", default=API, help="backend base URL")
    sub = parser.add_subparsers(dest="command", required=True)

    call_p = sub.add_parser("call", help="place an outbound call")
    call_p.add_argument("number")
    session_p = sub.add_parser("session", help="place a call, then hang up on Enter")
    session_p.add_argument("number")
    hangup_p = sub.add_parser("hangup", help="end a call by SID")
    hangup_p.add_argument("call_sid")
    sub.add_parser("token", help="fetch a browser voice token")

    args = parser.parse_args(argv)
    api = args.api.rstrip("/")

    if args.command == "call":
        return 0 if place_call(api, args.number) else 1
    if args.command == "hangup":
        return 0 if hangup(api, args.call_sid) else 1
    if args.command == "token":
        return 0 if fetch_token(api) else 1

    call_sid = place_call(api, args.number)
    if not call_sid:
        return 1
    log("INFO", "Call initiated, phone is ringing. Press Enter to hang up.")
    try:
        input()
    except (EOFError, KeyboardInterrupt):
        pass
    return 0 if hangup(api, call_sid) else 1


if __name__ == "__main__":
    sys.exit(main())
