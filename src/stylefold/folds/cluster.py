"""Data fold: replace the point set by at most ``max_clusters`` centroids."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from stylefold.model.geometry import Point


@dataclass(frozen=True)
class Cluster:
    """One k-means group: its centroid and the input indices it owns."""

    centroid: Point
    members: tuple[int, ...]


def nearest_indices(points: np.ndarray, centers: np.ndarray) -> np.ndarray:
    """Index of the nearest center for each point; ties pick the lowest index."""
    deltas = points[:, None, :] - centers[None, :, :]
    distances = np.sum(deltas**2, axis=2)
    return np.argmin(distances, axis=1)


def kmeans_clusters(
    points: list[Point], clusters: int, max_iterations: int = 20
) -> list[Cluster]:
    """Deterministic Lloyd's k-means seeded with the first ``k`` points.

    ``k = min(clusters, len(points))``.  Clusters that end up empty are
    dropped, so every returned centroid is the mean of at least one input
    point.  Distinct inputs no larger than ``clusters`` come back as
    singletons in input order.
    """
    if not points or clusters <= 0:
        return []

    data = np.asarray(points, dtype=float)
    k = min(clusters, len(points))
    centers = data[:k].copy()
    labels = nearest_indices(data, centers)

    for _ in range(max_iterations):
        updated = centers.copy()
        for cid in range(k):
            owned = data[labels == cid]
            if len(owned):
                updated[cid] = owned.mean(axis=0)
        new_labels = nearest_indices(data, updated)
        centers = updated
        if np.array_equal(new_labels, labels):
            break
        labels = new_labels

    result: list[Cluster] = []
    for cid in range(k):
        members = np.flatnonzero(labels == cid)
        if not len(members):
            continue
        center = data[members].mean(axis=0)
        result.append(
            Cluster(
                centroid=(float(center[0]), float(center[1])),
                members=tuple(int(m) for m in members),
            )
        )
    return result


class ClusterFoldTransform:
    """Collapse similar points onto shared centroids."""

    def __init__(self, max_clusters: int = 5, max_iterations: int = 20) -> None:
        self.max_clusters = max_clusters
        self.max_iterations = max_iterations

    def apply(self, points: list[Point]) -> list[Point]:
        clusters = kmeans_clusters(points, self.max_clusters, self.max_iterations)
        return [c.centroid for c in clusters]
