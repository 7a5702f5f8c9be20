"""FastAPI server exposing the packing planner."""

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from logic.validation import PlanRequest, first_error_message
from packing_app.app import PackingAssistantApp
from packing_app.logging_config import configure_logging

configure_logging()

_STATUS_BY_ERROR = {
    "rate_limited": 429,
    "location_not_found": 404,
    "forecast_unavailable": 502,
    "internal": 500,
}


def create_app(assistant: PackingAssistantApp | None = None) -> FastAPI:
    """Build the FastAPI instance around a packing assistant."""

    packing_app = assistant or PackingAssistantApp()
    api = FastAPI(title="Packing Assistant", version="0.1.0")

    @api.exception_handler(RequestValidationError)
    async def invalid_plan_request(_: Request, exc: RequestValidationError) -> JSONResponse:
        """Report the first failing field the same way the planner does."""

        return JSONResponse(status_code=400, content={"detail": first_error_message(exc)})

    @api.get("/healthz")
    async def healthcheck() -> dict:
        """Lightweight readiness probe."""

        return {
            "status": "ok",
            "service": "packing-assistant",
            "environment": packing_app.config.environment or "local",
        }

    @api.post("/plan")
    def plan(request: PlanRequest, http_request: Request) -> dict:
        """Build a packing plan for the destination and dates."""

        client_id = http_request.client.host if http_request.client else "default"
        response = packing_app.get_plan(request, client_id=client_id)
        if response.get("status") != "ok":
            status_code = _STATUS_BY_ERROR.get(str(response.get("error_type")), 400)
            raise HTTPException(status_code=status_code, detail=response.get("message", "planning failed"))
        return response

    return api


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:get_app", factory=True, host="0.0.0.0", port=8080, reload=False)
