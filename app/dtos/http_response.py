from dataclasses import asdict, dataclass, is_dataclass
from typing import Any

from ..core.exception import AppError


@dataclass(frozen=True)
class SignupResult:
    name: str
    email: str
    password: str


@dataclass(frozen=True)
class HttpResponse:
    status: int
    body: Any

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the `{status, body}` shape sent to clients"""
        if isinstance(self.body, AppError):
            body = self.body.to_dict()
        elif is_dataclass(self.body) and not isinstance(self.body, type):
            body = asdict(self.body)
        else:
            body = self.body

        return {"status": self.status, "body": body}
