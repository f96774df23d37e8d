import logging

from fastapi import APIRouter, Form, Request
from fastapi.responses import RedirectResponse

from app.services.presentation import WebView
from app.services.wizard_session import clear_state, load_state, save_state
from talent_risk.core import TOTAL_STEPS, WizardController, advance, answer_step, assess, is_complete, retreat
from talent_risk.errors import InvalidAnswerError

router = APIRouter(tags=["wizard"])
logger = logging.getLogger(__name__)


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=303)


def _after_navigation(state) -> RedirectResponse:
    if state.current_step == TOTAL_STEPS:
        return _redirect("/wizard/results")
    return _redirect("/wizard")


def _started_view(state) -> WebView:
    view = WebView(state.answers)
    WizardController(view, state).start()
    return view


@router.get("/")
def root():
    return RedirectResponse(url="/wizard", status_code=302)


@router.get("/wizard")
def wizard_page(request: Request):
    state = load_state(request)
    if state.current_step == TOTAL_STEPS:
        return _redirect("/wizard/results")
    view = _started_view(state)
    return request.app.state.templates.TemplateResponse(
        request,
        "wizard.html",
        {"wizard": view.step, "error": None},
    )


# POST handlers only move the stored state; the page is rendered after the redirect.
@router.post("/wizard/answer")
def wizard_answer(
    request: Request,
    field: str = Form(...),
    value: str = Form(""),
    advance_step: bool = Form(False, alias="advance"),
):
    state = load_state(request)
    if state.current_step == TOTAL_STEPS:
        return _redirect("/wizard/results")
    try:
        state = answer_step(state, state.current_step, field, value)
    except InvalidAnswerError as exc:
        logger.warning("Rejected wizard answer on step %s: %s", state.current_step, exc)
        view = _started_view(state)
        return request.app.state.templates.TemplateResponse(
            request,
            "wizard.html",
            {"wizard": view.step, "error": str(exc)},
            status_code=400,
        )
    if advance_step:
        state = advance(state)
    save_state(request, state)
    return _after_navigation(state)


@router.post("/wizard/next")
def wizard_next(request: Request):
    state = advance(load_state(request))
    save_state(request, state)
    return _after_navigation(state)


@router.post("/wizard/prev")
def wizard_prev(request: Request):
    state = retreat(load_state(request))
    save_state(request, state)
    return _after_navigation(state)


@router.post("/wizard/reset")
def wizard_reset(request: Request):
    clear_state(request)
    return _redirect("/wizard")


def completed_assessment(request: Request):
    state = load_state(request)
    if state.current_step != TOTAL_STEPS or not is_complete(state):
        return state, None
    return state, assess(state.answers)


@router.get("/wizard/results")
def wizard_results(request: Request):
    state = load_state(request)
    if state.current_step != TOTAL_STEPS or not is_complete(state):
        return _redirect("/wizard")

    view = _started_view(state)
    return request.app.state.templates.TemplateResponse(
        request,
        "results.html",
        {"wizard": view.step, **view.results},
    )
