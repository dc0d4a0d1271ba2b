"""
Lambda handlers for the Redis health service
Wraps the Flask status page apps with the serverless-wsgi adapter for AWS Lambda

- lambda_handler:      Secrets Manager backed check (REDIS_CLUSTER_* env vars)
- redis_check_handler: plain check (REDIS_HOST / REDIS_PASSWORD)
"""
import json
import os

import serverless_wsgi
from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from redis_health import create_app
from redis_health.config import CheckVariant, get_config
from redis_health.logging_setup import setup_logging

setup_logging()

# Determine config based on environment
config_name = "lambda" if os.getenv("AWS_LAMBDA_FUNCTION_NAME") else "production"

logger = Logger(service="redis-health", level=get_config(config_name).LOG_LEVEL)
tracer = Tracer(service="redis-health")

# Apps are reused across invocations; Redis connections and secrets are not
app = create_app(config_name, CheckVariant.SECRET)
redis_check_app = create_app(config_name, CheckVariant.PLAIN)


def _dispatch(flask_app, event: dict, context: LambdaContext) -> dict:
    try:
        # API Gateway HTTP API v2.0 may send headers as None or missing
        if "headers" not in event or event.get("headers") is None:
            event["headers"] = {}

        if "queryStringParameters" not in event:
            event["queryStringParameters"] = None

        request_context = event.get("requestContext", {})
        http_info = request_context.get("http", {})

        logger.info("Lambda invocation", extra={
            "request_id": context.aws_request_id,
            "function_name": context.function_name,
            "route": event.get("routeKey", "unknown"),
            "method": http_info.get("method", "unknown"),
            "path": http_info.get("path", "unknown"),
        })

        response = serverless_wsgi.handle_request(flask_app, event, context)

        logger.info("Lambda response", extra={
            "status_code": response.get("statusCode", 500),
            "request_id": context.aws_request_id,
        })
        return response

    except Exception as e:
        logger.error(f"Lambda handler error: {e}", exc_info=True)
        return {
            "statusCode": 500,
            "headers": {
                "Content-Type": "application/json"
            },
            "body": json.dumps({
                "error": "Internal server error",
                "message": str(e) if os.getenv("FLASK_DEBUG") == "true" else "An error occurred"
            })
        }


@logger.inject_lambda_context(log_event=True)
@tracer.capture_lambda_handler
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """
    Redis status page backed by Secrets Manager credentials

    Args:
        event: API Gateway HTTP API event (ignored apart from routing)
        context: Lambda context object

    Returns:
        API Gateway HTTP API response with the HTML status page
    """
    return _dispatch(app, event, context)


@logger.inject_lambda_context(log_event=True)
@tracer.capture_lambda_handler
def redis_check_handler(event: dict, context: LambdaContext) -> dict:
    """Plain REDIS_HOST / REDIS_PASSWORD status page."""
    return _dispatch(redis_check_app, event, context)
