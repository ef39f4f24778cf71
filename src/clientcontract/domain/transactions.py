"""Transaction scoping on top of a unit of work."""

from __future__ import annotations

from contextlib import contextmanager
from functools import wraps
from typing import TYPE_CHECKING, Any, Concatenate, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from clientcontract.domain.ports.unit_of_work import UnitOfWork


class HasUnitOfWork(Protocol):
    @property
    def unit_of_work(self) -> UnitOfWork[Any]: ...


@contextmanager
def transaction(uow: UnitOfWork[Any]) -> Iterator[None]:
    """Run the block in ``uow``, joining a transaction that is already open.

    The outermost scope commits on success; any exception rolls back through the
    unit of work's ``__exit__`` and propagates unchanged.
    """

    if uow.active:
        yield
        return
    with uow:
        yield
        uow.commit()


def transactional[S: HasUnitOfWork, **P, R](
    method: Callable[Concatenate[S, P], R],
) -> Callable[Concatenate[S, P], R]:
    """Decorate a service method so it runs inside ``self.unit_of_work``."""

    @wraps(method)
    def wrapper(self: S, *args: P.args, **kwargs: P.kwargs) -> R:
        with transaction(self.unit_of_work):
            return method(self, *args, **kwargs)

    return wrapper
