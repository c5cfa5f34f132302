from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

#logging stuff
from server_logs.loggers import server_logger
from server_logs.endpoints import router as logs_router
from server_logs.middleware import RequestLoggingMiddleware

from card_server.config import get_api_key, get_bind_address
from card_server.server_classes import CardsResponse, ErrorMessage
from card_server.utils.upstream import UpstreamError, fetch_card_items

SERVICE_NAME = "card-gallery"
SERVICE_VERSION = "1.0.0"

MISSING_KEY_MESSAGE = "API key is not configured on the server."
INTERNAL_ERROR_MESSAGE = "An internal server error occurred."

app = FastAPI(title=SERVICE_NAME, version=SERVICE_VERSION)
app.include_router(logs_router)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware, logger=server_logger)


@app.get("/")
def read_root():
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "endpoints": ["/api/cards"],
    }


# Plain `def` so FastAPI runs the blocking upstream call in its threadpool.
@app.get(
    "/api/cards",
    response_model=None,
    responses={
        200: {"model": CardsResponse},
        500: {"model": ErrorMessage},
    },
)
def get_cards():
    """Proxy the catalog's card list, reshaped to `{"cards": [...]}`."""
    api_key = get_api_key()
    if not api_key:

        #log code
        server_logger.error("cards_api_key_missing")

        return JSONResponse(status_code=500, content={"message": MISSING_KEY_MESSAGE})

    try:
        items = fetch_card_items(api_key)
    except UpstreamError as e:

        #log code
        server_logger.warning(
            "cards_upstream_failed",
            status=e.status_code,
            reason=e.reason
        )

        return JSONResponse(status_code=e.status_code, content={"message": e.reason})
    except Exception as e:

        # detail stays in the log, never in the response
        server_logger.error("cards_internal_error", error=repr(e))

        return JSONResponse(status_code=500, content={"message": INTERNAL_ERROR_MESSAGE})

    #log code
    server_logger.info("cards_served", count=len(items))

    return JSONResponse(status_code=200, content={"cards": items})


def main():
    host, port = get_bind_address()
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
