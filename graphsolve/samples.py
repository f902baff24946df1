"""Built-in example graphs, one per algorithm."""

from __future__ import annotations

from graphsolve.scenario import Scenario
from graphsolve.types.base import Algorithm

#: Pipe network with a maximum flow of 14 from A to F.
WATER_NETWORK = """\
A B 10
A C 8
B C 2
B D 4
B E 8
C E 9
D F 10
E F 10
"""

#: Five sites whose cheapest connecting tree costs 15.
SITE_LINKS = """\
A B 4
A C 8
B C 3
B D 5
C D 2
C E 7
D E 6
"""

#: Road map where the shortest route from 1 to 5 is 1-3-6-5 at distance 20.
ROAD_MAP = """\
1 2 7
1 3 9
1 6 14
2 3 10
2 4 15
3 4 11
3 6 2
4 5 6
5 6 9
"""


def example(algorithm: Algorithm) -> Scenario:
    """Return a new example scenario for ``algorithm``.

    Each call builds its own ``Scenario``, so callers may modify the result.
    """
    if algorithm is Algorithm.MAX_FLOW:
        return Scenario.from_text(
            algorithm,
            "A,B,C,D,E,F",
            WATER_NETWORK,
            source="A",
            target="F",
            name="water_network",
        )
    if algorithm is Algorithm.MINIMUM_SPANNING_TREE:
        return Scenario.from_text(algorithm, "A,B,C,D,E", SITE_LINKS, name="site_links")
    return Scenario.from_text(
        algorithm, "1,2,3,4,5,6", ROAD_MAP, source="1", target="5", name="road_map"
    )

