from fastapi import Body, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from typing import Any, Dict, Optional

from core.services.translation_service import TranslationService
from server.tools import call_tool, list_tools


def create_app(service: Optional[TranslationService] = None) -> FastAPI:
    """
    Builds the HTTP tool surface.
    Tool failures are answered with 200 and isError=true, like any other tool result.
    """
    app = FastAPI(title="angular-i18n-tools")
    app.state.service = service or TranslationService()

    # Allow CORS for local editors / dev frontends
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health")
    async def health():
        return {"status": "ok"}

    @app.get("/api/tools")
    async def get_tools():
        return {"tools": list_tools()}

    @app.post("/api/tools/{name}")
    def run_tool(name: str, arguments: Optional[Dict[str, Any]] = Body(default=None)):
        # sync handler: file I/O and the extraction subprocess run in FastAPI's threadpool
        return call_tool(app.state.service, name, arguments)

    return app


# Run with: uvicorn server.app:create_app --factory
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(create_app(), host="127.0.0.1", port=8000)
