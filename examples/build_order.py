"""Plan a build order for a set of packages.

Packages on a dependency cycle have to be built together, so they are
reported as one batch.
"""

from dataclasses import dataclass, field

import sccsort


@dataclass(frozen=True)
class Package:
    name: str
    requires: tuple[str, ...] = field(default=())


packages = [
    Package("web", requires=("orm", "templates")),
    Package("cli", requires=("orm",)),
    Package("orm", requires=("models",)),
    Package("models", requires=("orm", "utils")),
    Package("templates", requires=("utils",)),
    Package("utils"),
]

edges = [sccsort.edge(p.name, dep) for p in packages for dep in p.requires]

batches = sccsort.find_and_sort_strongly_connected_components_by(packages, lambda p: p.name, edges)

for i, batch in enumerate(batches, start=1):
    print(f"{i}. {', '.join(p.name for p in batch)}")

try:
    sccsort.topological_sort_by(packages, lambda p: p.name, edges)
except sccsort.CycleError as e:
    print(f"Strict order impossible: {e}")
