"""Compteurs Prometheus / Prometheus counters.

Les metriques HTTP viennent de prometheus-fastapi-instrumentator (voir main) ;
ici seulement les compteurs metier.
HTTP metrics come from prometheus-fastapi-instrumentator (see main); only
domain counters live here.
"""

from prometheus_client import Counter

COUNTRY_MUTATIONS = Counter(
    "country_directory_mutations_total",
    "Country create/update/delete operations",
    ["operation", "outcome"],
)
