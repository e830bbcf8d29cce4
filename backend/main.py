from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from partsearch import config
from partsearch.dispatcher import SearchValidationError, search_websites
from partsearch.schemas import SearchRequest

# Configure logging
logger = logging.getLogger(__name__)
logging.basicConfig(level=config.LOG_LEVEL)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"🚀 Part search API ready, CORS origins: {config.CORS_ORIGINS}")
    logger.info(f"Outbound fetch timeout {config.REQUEST_TIMEOUT}s, max redirects {config.MAX_REDIRECTS}")

    yield

    logger.info("Part search API shutting down")

app = FastAPI(lifespan=lifespan)

# ✅ Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.post("/api/search")
async def search(req: Request):
    try:
        data = await req.json()
        search_request = SearchRequest.model_validate(data)

        logger.info(
            f"🔍 Searching {len(search_request.websites or [])} websites for "
            f"name={search_request.part_name!r} number={search_request.part_number!r}"
        )

        response = await search_websites(search_request)

        logger.info(f"🎯 Returning {response.count} unique results")
        return response.model_dump()

    except SearchValidationError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except Exception as e:
        logger.error(f"❌ Error in search endpoint: {str(e)}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

@app.get("/api/websites")
async def websites():
    """Vendor sites the search form starts out with"""
    return {"websites": config.DEFAULT_WEBSITES}

@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=config.API_HOST,
        port=config.API_PORT,
        reload=True,
    )
