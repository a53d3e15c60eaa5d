"""Compiler registry.

``CompilerFactory`` maps each :class:`~sqlquery.schema.flavor.Flavor` to a
:class:`~sqlquery.compile.base.SQLCompiler` implementation.  The built-in
compilers are registered when :mod:`sqlquery` is imported; a compiler can be
swapped out without touching the statement builder::

    from sqlquery.compile.registry import CompilerFactory

    @CompilerFactory.register(Flavor.POSTGRESQL)
    class QuotingPostgresCompiler(PostgresCompiler):
        ...
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from sqlquery.compile.base import SQLCompiler
from sqlquery.errors import CompilationError
from sqlquery.schema.flavor import Flavor


class CompilerFactory:
    """Registry mapping flavors to :class:`SQLCompiler` classes.

    Example::

        compiler = CompilerFactory.create(Flavor.MYSQL)
    """

    _compilers: ClassVar[dict[Flavor, type[SQLCompiler]]] = {}

    @classmethod
    def register(cls, flavor: Flavor) -> Callable[[type[SQLCompiler]], type[SQLCompiler]]:
        """Decorator that registers a compiler class for ``flavor``.

        Args:
            flavor: The flavor the compiler renders.

        Returns:
            A decorator that registers and returns the compiler class.
        """

        def decorator(compiler_cls: type[SQLCompiler]) -> type[SQLCompiler]:
            cls._compilers[Flavor(flavor)] = compiler_cls
            return compiler_cls

        return decorator

    @classmethod
    def register_class(cls, flavor: Flavor, compiler_cls: type[SQLCompiler]) -> None:
        """Register a compiler class without using the decorator form."""
        cls._compilers[Flavor(flavor)] = compiler_cls

    @classmethod
    def create(cls, flavor: Flavor) -> SQLCompiler:
        """Instantiate the compiler registered for ``flavor``.

        Raises:
            CompilationError: If no compiler is registered for ``flavor``.
        """
        try:
            compiler_cls = cls._compilers.get(Flavor(flavor))
        except ValueError:
            compiler_cls = None
        if compiler_cls is None:
            registered = cls.registered_flavors()
            raise CompilationError(
                f"Unsupported flavor: {flavor!r}. Registered flavors: {registered}."
            )
        return compiler_cls()

    @classmethod
    def registered_flavors(cls) -> list[str]:
        """Return the sorted list of registered flavor names."""
        return sorted(f.value for f in cls._compilers)
