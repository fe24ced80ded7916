"""
Service context extraction for log traceability.

Every log line carries `service@env:instance` so lines from several
replicas of the seat selection service can be told apart.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'seat-selection')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Container hostname when running under an orchestrator, PID locally
    instance_id = os.getenv('HOSTNAME', '')[:12] or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance_id}'
