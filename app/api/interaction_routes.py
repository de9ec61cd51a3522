from fastapi import APIRouter, BackgroundTasks, Depends, Request, status
from fastapi.responses import JSONResponse
from app.discord.handler import InteractionHandler
from app.errors import InteractionValidationError

router = APIRouter(tags=["interactions"])


def get_interaction_handler(request: Request) -> InteractionHandler:
    return request.app.state.interaction_handler


@router.post("/")
async def interactions(
    request: Request,
    background_tasks: BackgroundTasks,
    handler: InteractionHandler = Depends(get_interaction_handler),
):
    body = await request.body()
    try:
        outcome = await handler.handle(request.headers, body)
    except InteractionValidationError as e:
        return JSONResponse(status_code=e.status_code, content={"error": e.message})

    if outcome.start_followup is not None:
        background_tasks.add_task(outcome.start_followup)

    return outcome.response.to_payload()


@router.api_route("/", methods=["GET", "HEAD", "OPTIONS", "PUT", "PATCH", "DELETE"])
async def interactions_wrong_method():
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Only POST is supported on this endpoint"},
    )
