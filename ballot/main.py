import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .admin import router as admin_router
from .config import ELECTION_TITLE, HOST, LOG_LEVEL, NODE_ID, OBSERVERS, PORT
from .errors import BallotError
from .public import router as public_router
from .state import get_service

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting ballot node {NODE_ID} ({len(OBSERVERS)} observers)")
    yield
    logger.info(f"Stopping ballot node {NODE_ID}")


app = FastAPI(
    title=f"{ELECTION_TITLE} ({NODE_ID})",
    lifespan=lifespan,
)

app.include_router(admin_router)
app.include_router(public_router)


@app.exception_handler(BallotError)
async def ballot_error_handler(request: Request, exc: BallotError):
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.kind}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"ok": False, "error": exc.kind, "detail": exc.detail},
    )


@app.get("/")
def root():
    return {"node": NODE_ID, "election": ELECTION_TITLE, **get_service().summary()}


def run():
    import uvicorn
    uvicorn.run("ballot.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
