from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.controllers.signup_controller import SignupController
from app.core.container import Container
from app.schemas.signup import ErrorResponse, SignupRequest, SignupResponse

signup_router = APIRouter(prefix="/signup", tags=["signup"])


@signup_router.post(
    "",
    response_model=SignupResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@inject
def signup(
    request: SignupRequest,
    controller: SignupController = Depends(Provide[Container.signup_controller]),
):
    response = controller.handle(request)
    return JSONResponse(
        status_code=response.status,
        content=response.to_dict()["body"],
    )
