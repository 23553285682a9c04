from fastapi import APIRouter

from app.dependencies import NewsServiceDep
from app.news.schemas import AggregateReport, AnalyzeRequest

router = APIRouter()
legacy_router = APIRouter()


@router.post("/analyze", response_model=AggregateReport)
async def analyze_coin_news(request: AnalyzeRequest, service: NewsServiceDep) -> AggregateReport:
    return await service.analyze(request.coin_name, request.coin_symbol)


# Path used by the original edge function clients
legacy_router.add_api_route(
    "/analyze-coin-news",
    analyze_coin_news,
    methods=["POST"],
    response_model=AggregateReport,
)
