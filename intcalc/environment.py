from typing import Iterator, Optional

from intcalc.errors import UndefinedVariable


class Environment:
    """Flat variable namespace of a single session

    There is no scoping, shadowing or deletion: a name, once assigned, stays bound
    to its last value for as long as the environment lives. An environment must not
    be shared between sessions.
    """

    def __init__(self, bindings: Optional[dict[str, int]] = None) -> None:
        self._bindings: dict[str, int] = dict(bindings) if bindings else dict()

    def get(self, name: str) -> int:
        try:
            return self._bindings[name]
        except KeyError:
            raise UndefinedVariable(name) from None

    def set(self, name: str, value: int) -> None:
        self._bindings[name] = value

    def as_dict(self) -> dict[str, int]:
        return dict(self._bindings)

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"Environment({self._bindings!r})"
