from typing import Callable, List, Optional, Sequence, Set

from dotti_factory.domain import IDependencyResolver, MissingConfigurationError, ResolutionContext


class DependencyResolver(IDependencyResolver):
    """Computes build orders with a depth-first topological sort.

    Names that are already built are treated as leaves and left out of the
    order, so satisfied subgraphs are never descended into again. Names in
    progress are tracked in a ResolutionContext to detect cycles.
    """

    def resolve_order(
        self,
        root: str,
        dependencies_of: Callable[[str], Optional[Sequence[str]]],
        already_built: Callable[[str], bool],
    ) -> List[str]:
        """Return the names to build for ``root``, dependencies before dependents.

        Args:
            root: The requested name.
            dependencies_of: Returns the referenced names of a descriptor, or None
                when the name has no descriptor.
            already_built: Returns whether a name is already cached.

        Returns:
            Names in build order, each once, ``root`` last. Empty if ``root`` is built.

        Raises:
            MissingConfigurationError: If a reachable name is neither configured nor built.
            DependencyCycleError: If the reachable graph contains a cycle.

        Example:
            >>> graph = {"a": ["b"], "b": ["c"], "c": []}
            >>> DependencyResolver().resolve_order("a", graph.get, lambda name: False)
            ['c', 'b', 'a']
        """
        order: List[str] = []
        completed: Set[str] = set()
        context = ResolutionContext()

        def visit(name: str, required_by: Optional[str]) -> None:
            if name in completed:
                return

            context.push(name)
            try:
                if not already_built(name):
                    dependencies = dependencies_of(name)
                    if dependencies is None:
                        raise MissingConfigurationError(name, required_by)
                    for dependency in dependencies:
                        visit(dependency, name)
                    order.append(name)
                completed.add(name)
            finally:
                context.pop()

        visit(root, None)
        return order
