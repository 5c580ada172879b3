from typing import Optional

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inspiration_proxy.config import CORS_ORIGINS, DEFAULT_LIMIT, DEFAULT_QUERY, HOST, PORT
from inspiration_proxy.errors import ScraperExitError
from inspiration_proxy.logger import get_logger
from inspiration_proxy.service import fetch_inspirations

app = FastAPI(title="Inspiration Proxy API", version="0.1.0")
app.add_middleware(
	CORSMiddleware,
	allow_origins=CORS_ORIGINS,
	allow_methods=["*"],
	allow_headers=["*"],
)
log = get_logger(__name__)

FETCH_ERROR = {"error": "Failed to fetch inspirations."}


@app.get("/health")
def health():
	return {"status": "ok"}


@app.get("/api/inspirations")
async def inspirations_endpoint(
	query: Optional[str] = Query(None, description=f"Search term (default '{DEFAULT_QUERY}')"),
	limit: Optional[str] = Query(None, description=f"Number of images to fetch (default {DEFAULT_LIMIT})"),
):
	log.info(f"API /api/inspirations query='{query}' limit={limit}")
	try:
		return await fetch_inspirations(query, limit)
	except ScraperExitError as e:
		log.error(f"Error fetching inspirations: {e} stderr={e.stderr.strip()}")
	except Exception as e:
		log.error(f"Error fetching inspirations: {type(e).__name__}: {e}")
	return JSONResponse(status_code=500, content=FETCH_ERROR)


if __name__ == "__main__":
	import uvicorn
	log.info(f"Backend server is running on port {PORT}")
	uvicorn.run("api_main:app", host=HOST, port=PORT, reload=False)
