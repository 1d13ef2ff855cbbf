from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING
from typing import ClassVar

from cleo.helpers import argument
from cleo.helpers import option

from packsolve.console.commands.command import Command
from packsolve.console.exceptions import PackSolveConsoleError
from packsolve.packages.package_identity import normalize_name


if TYPE_CHECKING:
    from cleo.io.inputs.argument import Argument
    from cleo.io.inputs.option import Option

    from packsolve.factory import ResolutionRequest
    from packsolve.packages import PackageDependencyInfo
    from packsolve.packages import PackageIdentity
    from packsolve.resolver import DependencyBehavior


class ResolveCommand(Command):
    name = "resolve"
    description = "Resolves the packages requested by a manifest."

    arguments: ClassVar[list[Argument]] = [
        argument(
            "manifest",
            "The manifest describing the request and the available packages.",
            optional=True,
            default="packsolve.toml",
        )
    ]
    options: ClassVar[list[Option]] = [
        option(
            "behavior",
            "b",
            "How to pick among the allowed versions"
            " (lowest, highest, highest-minor, highest-patch).",
            flag=False,
        ),
        option(
            "max-steps",
            None,
            "Give up after this many attempted selections.",
            flag=False,
        ),
        option("tree", None, "Display the dependency tree."),
    ]

    loggers: ClassVar[list[str]] = [
        "packsolve.factory",
        "packsolve.resolver.combination_solver",
        "packsolve.resolver.grouping",
        "packsolve.resolver.package_resolver",
        "packsolve.resolver.sequencer",
    ]

    def handle(self) -> int:
        from packsolve.factory import Factory
        from packsolve.resolver import PackageResolver
        from packsolve.resolver import ResolverError
        from packsolve.toml import TOMLError

        try:
            max_steps = self._max_steps()
            request = Factory().create_request(Path(self.argument("manifest")))
            resolver = PackageResolver(
                self._dependency_behavior(request), max_steps=max_steps
            )

            self.line("Resolving dependencies...")

            result = resolver.solve(
                request.targets, request.available, request.installed
            )
        except (ResolverError, TOMLError) as e:
            self.line_error(f"<error>{e}</error>")

            return 1

        self.line("")
        self.line("Resolution results:")
        self.line("")

        if self.option("tree"):
            self._display_tree(request, result.packages)

            return 0

        if not result.packages:
            return 0

        name_length = max(len(package.name) for package in result.packages)
        for package in result.packages:
            self.line(
                f"<c1>{package.name:{name_length}}</c1> <b>{package.version}</b>"
            )

        return 0

    def _dependency_behavior(
        self, request: ResolutionRequest
    ) -> DependencyBehavior | str:
        behavior = self.option("behavior")
        if behavior:
            return str(behavior)

        if request.dependency_behavior is not None:
            return request.dependency_behavior

        return self.config.dependency_behavior

    def _max_steps(self) -> int | None:
        from packsolve.config.config import int_validator
        from packsolve.resolver import InvalidInputError

        value = self.option("max-steps")
        if value is None:
            try:
                return self.config.max_steps
            except ValueError:
                raise InvalidInputError(
                    "The resolver.max-steps setting must be a positive integer."
                )

        if not int_validator(value):
            raise PackSolveConsoleError(
                f'"{value}" is an invalid value for --max-steps.'
            )

        return int(value)

    def _display_tree(
        self, request: ResolutionRequest, packages: list[PackageIdentity]
    ) -> None:
        resolved = {package.key: request.find_package(package) for package in packages}

        for target in request.targets:
            package = resolved[normalize_name(target)]
            self.line(f"<c1>{package.name}</c1> <b>{package.version}</b>")
            self._display_dependencies(package.key, resolved, [package.key], "")

    def _display_dependencies(
        self,
        key: str,
        resolved: dict[str, PackageDependencyInfo],
        packages_in_tree: list[str],
        previous_tree_bar: str,
    ) -> None:
        package = resolved[key]
        dependencies = sorted(
            (d for d in package.dependencies if d.key != key),
            key=lambda d: d.key,
        )

        total = len(dependencies)
        for i, dependency in enumerate(dependencies, 1):
            tree_bar = previous_tree_bar + ("└" if i == total else "├")

            circular_warn = ""
            if dependency.key in packages_in_tree:
                circular_warn = " (circular dependency aborted here)"

            self._write_tree_line(
                f"{tree_bar}── <c1>{dependency.name}</c1>"
                f" {dependency.constraint}{circular_warn}"
            )

            if not circular_warn and dependency.key in resolved:
                self._display_dependencies(
                    dependency.key,
                    resolved,
                    [*packages_in_tree, dependency.key],
                    previous_tree_bar + ("    " if i == total else "│   "),
                )

    def _write_tree_line(self, line: str) -> None:
        if not self.io.output.supports_utf8():
            line = line.replace("└", "`-")
            line = line.replace("├", "|-")
            line = line.replace("──", "-")
            line = line.replace("│", "|")

        self.line(line)
