"""
AgentCore Runtime entry point for cloud deployment.

Accepts the same ``{agentName, userPrompt, stockSymbol}`` payload as the HTTP
endpoint and returns the same body; failures carry their status code in a
``status`` field because AgentCore has no per-invocation HTTP status.

Settings (including an optional APP_SECRET_ARN secret) are loaded and the use
case wired on the first invocation, then reused for the life of the container.

Deploy:
    agentcore configure \\
        --entrypoint src/infrastructure/entrypoints/agentcore_handler.py \\
        --execution-role <AGENTCORE_EXECUTION_ROLE_ARN> \\
        --ecr-uri <ECR_REPOSITORY_URL>
    agentcore deploy --env APP_SECRET_ARN=<arn>
"""

from functools import lru_cache

from bedrock_agentcore.runtime import BedrockAgentCoreApp

from src.application.use_cases.analyze_stock import AnalysisRequest, AnalyzeStockUseCase
from src.infrastructure.config import load_settings
from src.infrastructure.entrypoints.container import build_analyze_use_case, build_observability
from src.infrastructure.entrypoints.http_errors import error_response
from src.infrastructure.entrypoints.schemas import AnalysisResponse
from src.infrastructure.observability.logging_setup import configure_logging

app = BedrockAgentCoreApp()


@lru_cache(maxsize=1)
def _get_use_case() -> AnalyzeStockUseCase:
    settings = load_settings()
    configure_logging(settings.log_level)
    return build_analyze_use_case(settings, build_observability(settings))


@app.entrypoint
async def invoke(payload: dict, context=None) -> dict:
    """AgentCore entrypoint: one analysis per invocation."""
    try:
        request = AnalysisRequest.from_payload(payload)
        result = await _get_use_case().handle(request)
    except Exception as exc:
        status, body = error_response(exc)
        return {"status": status, **body}
    return AnalysisResponse.from_result(result).to_payload()


if __name__ == "__main__":
    app.run()
