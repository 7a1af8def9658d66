"""Abstract grid for hierarchical pathfinding: clusters and oceanic gateways."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

_OCEAN = 0


@dataclass
class Cluster:
    """A rectangular region of the map."""

    id: int
    x: int
    y: int
    width: int
    height: int


@dataclass
class Node:
    """A tile coordinate on the tactical grid."""

    x: int
    y: int
    cost: float = 1.0


@dataclass
class Gateway:
    """Passable tiles connecting two adjacent clusters."""

    id: int
    cluster1_id: int
    cluster2_id: int
    nodes: list[Node] = field(default_factory=list)


class AbstractGrid:
    """Macro-level partition of a map into clusters and gateways."""

    def __init__(self, map_width: int, map_height: int, region_size: int) -> None:
        if region_size <= 0:
            raise ValueError("region_size must be positive")
        self.region_width = region_size
        self.region_height = region_size
        self.clusters: list[Cluster] = []
        self.gateways: list[Gateway] = []
        self.build_clusters(map_width, map_height)

    def build_clusters(self, map_width: int, map_height: int) -> None:
        """Split the map into clusters, row by row; edge clusters are trimmed."""
        cols = (map_width + self.region_width - 1) // self.region_width
        rows = (map_height + self.region_height - 1) // self.region_height

        self.clusters = []
        for row in range(rows):
            for col in range(cols):
                start_x = col * self.region_width
                start_y = row * self.region_height
                self.clusters.append(
                    Cluster(
                        id=len(self.clusters),
                        x=start_x,
                        y=start_y,
                        width=min(self.region_width, map_width - start_x),
                        height=min(self.region_height, map_height - start_y),
                    )
                )

    def build_nav_mesh(self, grid_tiles: Sequence[int], map_width: int) -> None:
        """Build gateways over ocean tiles (biome 0) on shared cluster boundaries."""
        self.gateways = []

        for i, c1 in enumerate(self.clusters):
            for c2 in self.clusters[i + 1 :]:
                horizontal = c1.x + c1.width == c2.x and c1.y == c2.y
                vertical = c1.y + c1.height == c2.y and c1.x == c2.x
                if not (horizontal or vertical):
                    continue

                nodes = self._boundary_nodes(c1, c2, grid_tiles, map_width)
                if nodes:
                    self.gateways.append(
                        Gateway(
                            id=len(self.gateways),
                            cluster1_id=c1.id,
                            cluster2_id=c2.id,
                            nodes=nodes,
                        )
                    )

    @staticmethod
    def _boundary_nodes(
        c1: Cluster, c2: Cluster, grid_tiles: Sequence[int], map_width: int
    ) -> list[Node]:
        if c1.y + c1.height == c2.y:
            edge_y = c1.y + c1.height - 1
            coords = ((x, edge_y) for x in range(c1.x, c1.x + c1.width))
        elif c1.x + c1.width == c2.x:
            edge_x = c1.x + c1.width - 1
            coords = ((edge_x, y) for y in range(c1.y, c1.y + c1.height))
        else:
            return []

        nodes = []
        for x, y in coords:
            idx = y * map_width + x
            if idx < len(grid_tiles) and grid_tiles[idx] == _OCEAN:
                nodes.append(Node(x=x, y=y, cost=1.0))
        return nodes