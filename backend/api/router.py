from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_engine
from config import settings
from models.requests import MatchFilters, MatchRequest, SizeRange, TopMatchesRequest
from models.responses import HealthResponse, MatchResult, RankedMatch, TopMatchesResponse
from models.schemas.opportunity import Opportunity
from models.schemas.team import Team
from services.match_analytics import score_distribution
from services.matching_engine import MatchingEngine

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
def health(engine: MatchingEngine = Depends(get_engine)):
    return HealthResponse(
        status="ok",
        teams=len(engine.teams),
        opportunities=len(engine.opportunities),
    )


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

@router.post("/match", response_model=MatchResult)
@limiter.limit(settings.rate_limit)
def match(request: Request, body: MatchRequest, engine: MatchingEngine = Depends(get_engine)):
    return engine.match(body.team, body.opportunity)


@router.post("/matches/top", response_model=TopMatchesResponse)
@limiter.limit(settings.rate_limit)
def top_matches(request: Request, body: TopMatchesRequest, engine: MatchingEngine = Depends(get_engine)):
    limit = body.limit or settings.default_top_limit
    if limit > settings.max_top_limit:
        raise HTTPException(
            status_code=400,
            detail=f"Limit too large (max {settings.max_top_limit})",
        )
    matches = engine.top_matches(body.teams, body.opportunities, limit=limit)
    return TopMatchesResponse(matches=matches, distribution=score_distribution(matches))


# ---------------------------------------------------------------------------
# Teams
# ---------------------------------------------------------------------------

@router.get("/teams", response_model=list[Team])
def list_teams(engine: MatchingEngine = Depends(get_engine)):
    return engine.teams.list()


@router.post("/teams", response_model=Team, status_code=201)
def create_team(team: Team, engine: MatchingEngine = Depends(get_engine)):
    try:
        return engine.teams.add(team)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/teams/{team_id}", response_model=Team)
def get_team(team_id: str, engine: MatchingEngine = Depends(get_engine)):
    team = engine.teams.get(team_id)
    if team is None:
        raise HTTPException(status_code=404, detail="Team not found")
    return team


@router.put("/teams/{team_id}", response_model=Team)
def update_team(team_id: str, team: Team, engine: MatchingEngine = Depends(get_engine)):
    try:
        return engine.teams.update(team_id, team)
    except KeyError:
        raise HTTPException(status_code=404, detail="Team not found")


@router.delete("/teams/{team_id}", status_code=204)
def delete_team(team_id: str, engine: MatchingEngine = Depends(get_engine)):
    try:
        engine.teams.delete(team_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Team not found")
    return Response(status_code=204)


@router.get("/teams/{team_id}/opportunities", response_model=list[RankedMatch])
@limiter.limit(settings.rate_limit)
def opportunities_for_team(
    request: Request,
    team_id: str,
    min_score: int | None = Query(None, ge=0, le=100),
    max_results: int | None = Query(None, ge=1),
    industry: list[str] = Query([]),
    engine: MatchingEngine = Depends(get_engine),
):
    filters = MatchFilters(
        min_score=min_score,
        max_results=max_results,
        industry_preference=industry,
    )
    try:
        return engine.find_opportunities_for_team(team_id, filters)
    except LookupError:
        raise HTTPException(status_code=404, detail="Team not found")


# ---------------------------------------------------------------------------
# Opportunities
# ---------------------------------------------------------------------------

@router.get("/opportunities", response_model=list[Opportunity])
def list_opportunities(engine: MatchingEngine = Depends(get_engine)):
    return engine.opportunities.list()


@router.post("/opportunities", response_model=Opportunity, status_code=201)
def create_opportunity(opportunity: Opportunity, engine: MatchingEngine = Depends(get_engine)):
    try:
        return engine.opportunities.add(opportunity)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/opportunities/{opportunity_id}", response_model=Opportunity)
def get_opportunity(opportunity_id: str, engine: MatchingEngine = Depends(get_engine)):
    opportunity = engine.opportunities.get(opportunity_id)
    if opportunity is None:
        raise HTTPException(status_code=404, detail="Opportunity not found")
    return opportunity


@router.delete("/opportunities/{opportunity_id}", status_code=204)
def delete_opportunity(opportunity_id: str, engine: MatchingEngine = Depends(get_engine)):
    try:
        engine.opportunities.delete(opportunity_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Opportunity not found")
    return Response(status_code=204)


@router.get("/opportunities/{opportunity_id}/teams", response_model=list[RankedMatch])
@limiter.limit(settings.rate_limit)
def teams_for_opportunity(
    request: Request,
    opportunity_id: str,
    min_score: int | None = Query(None, ge=0, le=100),
    max_results: int | None = Query(None, ge=1),
    min_size: int | None = Query(None, ge=1),
    max_size: int | None = Query(None, ge=1),
    engine: MatchingEngine = Depends(get_engine),
):
    if min_size is not None and max_size is not None and min_size > max_size:
        raise HTTPException(status_code=400, detail="min_size must not exceed max_size")
    size_range = None
    if min_size is not None or max_size is not None:
        size_range = SizeRange(
            min=min_size if min_size is not None else 1,
            max=max_size if max_size is not None else SizeRange().max,
        )
    filters = MatchFilters(
        min_score=min_score,
        max_results=max_results,
        team_size_range=size_range,
    )
    try:
        return engine.find_teams_for_opportunity(opportunity_id, filters)
    except LookupError:
        raise HTTPException(status_code=404, detail="Opportunity not found")
