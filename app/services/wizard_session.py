from __future__ import annotations

from fastapi import Request

from talent_risk.core import WizardState

SESSION_KEY = "wizard"


def load_state(request: Request) -> WizardState:
    return WizardState.from_payload(request.session.get(SESSION_KEY))


def save_state(request: Request, state: WizardState) -> None:
    request.session[SESSION_KEY] = state.to_payload()


def clear_state(request: Request) -> None:
    request.session.pop(SESSION_KEY, None)
