# Run with: gunicorn -c gunicorn.conf.py "profilehub.factory:create_app()"
import os

# Stores whose uniqueness holds only inside one process.
PROCESS_LOCAL_BACKENDS = frozenset({"memory", "file"})

# Bind & workers
bind = "0.0.0.0:8000"
workers = int(os.getenv("GUNICORN_WORKERS", "1"))
threads = int(os.getenv("GUNICORN_THREADS", "4"))  # account stores are thread-safe
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr (collected by Docker)
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

# Honour proxy headers
forwarded_allow_ips = "*"
proxy_protocol = False


def on_starting(server):
    """Refuse several workers over a process-local store (``-w`` flags included)."""
    backend = os.getenv("STORAGE_BACKEND", "memory").strip().lower()
    if server.cfg.workers > 1 and backend in PROCESS_LOCAL_BACKENDS:
        raise RuntimeError(
            f"STORAGE_BACKEND={backend} keeps accounts per process; "
            f"run one worker (got {server.cfg.workers}) or use sql/redis."
        )
