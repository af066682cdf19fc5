from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Request, Response

SCENE_BUILDS_TOTAL = Counter(
    "design_bridge_scene_builds_total",
    "Scene builds by outcome",
    ["outcome"],
)

NODES_BUILT_TOTAL = Counter(
    "design_bridge_nodes_built_total",
    "Host nodes produced by the scene builder",
    ["node_type"],
)

UPSTREAM_CALLS_TOTAL = Counter(
    "design_bridge_upstream_calls_total",
    "Calls forwarded to the language-model API by resulting status",
    ["model", "status"],
)

UPSTREAM_LATENCY = Histogram(
    "design_bridge_upstream_latency_seconds",
    "Duration of language-model API calls",
    ["model"],
)


def metrics_endpoint(request: Request) -> Response:
    """Route handler for /metrics (scraped by Prometheus)."""
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

# Import-side-effect free; counters are updated by the builder and the forwarder.
