"""
HTTP surface for the interaction checker.

Endpoints:
- POST /check          food/drug interaction check
- GET  /medications    canonical drug keys (autocomplete)
- GET  /foods/{drug}   curated foods for a drug or alias (autocomplete)
- GET  /health         liveness + store size

Run:  uvicorn interaction_checker.api.app:create_app --factory
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from interaction_checker.matching import InteractionResolver, build_resolver
from interaction_checker.utils.config_manager import ConfigManager

logger = logging.getLogger(__name__)


class CheckRequest(BaseModel):
    # Optional so a missing field reaches the resolver's validation message
    food: Optional[str] = None
    drug: Optional[str] = None


def create_app(resolver: Optional[InteractionResolver] = None,
               config: Optional[ConfigManager] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The store is loaded here, before the app exists, so a missing or corrupt
    curated data file stops the process from serving.
    """
    if config is None:
        config = ConfigManager.from_default_path()
    if resolver is None:
        resolver = build_resolver(config)

    app = FastAPI(title="Food-Drug Interaction Checker")
    app.state.resolver = resolver

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.get('api', 'allow_origins'),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post("/check")
    def check(body: CheckRequest, request: Request) -> Dict[str, Any]:
        result = request.app.state.resolver.check(body.food, body.drug)
        return result.to_dict()

    @app.get("/medications")
    def medications(request: Request) -> List[str]:
        return request.app.state.resolver.list_medications()

    @app.get("/foods/{drug}")
    def foods(drug: str, request: Request) -> List[str]:
        return request.app.state.resolver.list_foods(drug)

    @app.get("/health")
    def health(request: Request) -> Dict[str, Any]:
        return {"status": "ok", "drugs": len(request.app.state.resolver.store)}

    return app


def main():
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(create_app(), host="0.0.0.0", port=3000)


if __name__ == "__main__":
    main()
