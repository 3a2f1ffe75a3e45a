'''Read diagnostics'''
from dataclasses import dataclass
from typing import Any, Dict, List, Literal

from dataclasses_json import dataclass_json

SEVERITY_ERROR = 'error'
SEVERITY_WARNING = 'warning'


@dataclass_json
@dataclass(frozen=True)
class Diagnostic:
    '''A single error or warning attached to a read'''
    severity: Literal['error', 'warning']
    summary: str
    detail: str = ''


class Diagnostics(List[Diagnostic]):
    '''Ordered diagnostics collection for one read'''

    def add_error(self, summary: str, detail: str = '') -> None:
        self.append(Diagnostic(SEVERITY_ERROR, summary, detail))

    def add_warning(self, summary: str, detail: str = '') -> None:
        self.append(Diagnostic(SEVERITY_WARNING, summary, detail))

    def has_error(self) -> bool:
        return any(d.severity == SEVERITY_ERROR for d in self)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self if d.severity == SEVERITY_ERROR]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self if d.severity == SEVERITY_WARNING]

    def to_list(self) -> List[Dict[str, Any]]:
        return [d.to_dict() for d in self]  # type: ignore[attr-defined]
