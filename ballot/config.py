# env vars + constants
import os

NODE_ID = os.getenv("NODE_ID", "ballot-node")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

ELECTION_TITLE = os.getenv("ELECTION_TITLE", "Ballot")

# Identity the external auth layer uses for the administrator.
ADMIN_ADDRESS = os.getenv("ADMIN_ADDRESS", "admin").strip()

# Observer endpoints that receive emitted notifications (best effort).
OBSERVERS = [o.strip() for o in os.getenv("OBSERVERS", "").split(",") if o.strip()]
NOTIFY_TIMEOUT = float(os.getenv("NOTIFY_TIMEOUT", "1.5"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CALLER_HEADER = "X-Caller-Address"
