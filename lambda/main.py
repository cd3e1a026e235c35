import time

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from mangum import Mangum

import bedrock_service
import example_service
from models import ExampleServiceError, ResponseEnvelope, ServerError
from notification_service import notify_in_background
from utils import logging

RESPONSE_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "x-api-key",
    "X-Content-Type-Options": "nosniff",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-XSS-Protection": "1; mode=block",
    "Content-Security-Policy": "default-src 'none'",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store, max-age=0",
}

router = APIRouter()


# Dependency handing the shared, read-only Bedrock client to the routes
def get_bedrock_client(request: Request):
    return request.app.state.bedrock_client


def get_source_ip(request: Request) -> str:
    source_ip = request.scope.get("aws.event", {}).get("requestContext", {}).get("identity", {}).get("sourceIp")
    if source_ip:
        return source_ip
    return request.client.host if request.client else "unknown"


def error_response(status_code: int, message: str) -> JSONResponse:
    envelope = ResponseEnvelope(message=message, language="", sentences=[])
    return JSONResponse(status_code=status_code, content=envelope.model_dump(), headers=RESPONSE_HEADERS)


@router.get("/{word}", response_model=ResponseEnvelope, responses={400: {"model": ResponseEnvelope}, 500: {"model": ResponseEnvelope}})
def get_examples(word: str, request: Request, client=Depends(get_bedrock_client)):
    source_ip = get_source_ip(request)
    logging.info(f"User IP: {source_ip}")

    def notify(validated_word: str):
        notify_in_background(f"Requested word: {validated_word} --- User IP: {source_ip}")

    return example_service.generate_examples(word, client, notify=notify)


def create_app(bedrock_client) -> FastAPI:
    app = FastAPI(title="OghmAI Examples")
    app.state.bedrock_client = bedrock_client

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        # Generate a request ID for tracking
        logging.set_request_id()

        start_time = time.time()
        logging.info(f"Incoming request: {request.method} {request.url.path}")

        try:
            response = await call_next(request)
            response.headers.update(RESPONSE_HEADERS)

            process_time = time.time() - start_time
            logging.info(f"Completed request: {request.method} {request.url.path} with {response.status_code} in {process_time:.2f} seconds")

            return response
        finally:
            logging.clear_request_id()

    @app.exception_handler(ExampleServiceError)
    async def service_exception_handler(request: Request, exc: ExampleServiceError):
        if isinstance(exc, ServerError):
            logging.exception(f"Server error at {request.method} {request.url.path} - {str(exc)}", exc_info=exc)
        else:
            logging.warning(f"Invalid word: {str(exc)}")
        return error_response(exc.status_code, exc.public_message)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logging.exception(f"Unhandled exception at {request.method} {request.url.path} - {str(exc)}", exc_info=exc)
        return error_response(500, ServerError.public_message)

    app.include_router(router)
    return app


# FASTAPI app and AWS Lambda handler
app = create_app(bedrock_service.create_client())
handler = Mangum(app, lifespan="off")
