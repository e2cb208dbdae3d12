from __future__ import annotations

from types import SimpleNamespace
from typing import Any

DAY_UNIX = 1700000000

GPV_GROUPS = [f"GPV{queue}.{sub}" for queue in range(1, 7) for sub in (1, 2)]


def build_matrix(default: str = "yes") -> dict[str, dict[str, str]]:
    return {
        group: {str(hour): default for hour in range(1, 25)}
        for group in GPV_GROUPS
    }


def schedule_page(script_body: str, *, extra_scripts: tuple[str, ...] = ()) -> str:
    scripts = "".join(f"<script>{body}</script>" for body in extra_scripts)
    return (
        "<html><head><title>Графік</title>"
        f"{scripts}"
        "</head><body><div id='app'></div>"
        f"<script>{script_body}</script>"
        "</body></html>"
    )


def sample_fact() -> dict[str, Any]:
    matrix = build_matrix("yes")
    matrix["GPV5.1"]["9"] = "no"
    matrix["GPV5.1"]["10"] = "no"
    matrix["GPV3.2"]["24"] = "no"
    return {
        "data": {str(DAY_UNIX): matrix},
        "update": "15.11.2023 00:13",
        "today": DAY_UNIX,
    }


class FakeSource:
    def __init__(self, payload: Any = None, error: Exception | None = None) -> None:
        self.payload = payload
        self.error = error
        self.calls = 0

    async def fetch_fact(self) -> Any:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.payload


class FakeMessage:
    def __init__(self) -> None:
        self.replies: list[str] = []

    async def reply_text(self, text: str, **kwargs: Any) -> None:
        self.replies.append(text)


def fake_update(first_name: str | None = "Олена", username: str | None = "olena") -> SimpleNamespace:
    user = SimpleNamespace(id=42, first_name=first_name, username=username)
    return SimpleNamespace(effective_user=user, effective_message=FakeMessage())
