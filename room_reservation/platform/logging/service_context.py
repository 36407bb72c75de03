"""
Service context extraction for distributed logging.

Gives every log line a `service@env:instance` prefix so lines from several
API workers can be told apart.
"""

from functools import lru_cache
import os


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'room-reservation')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Container hostname when running under docker/k8s, PID otherwise
    instance_id = os.getenv('HOSTNAME', '')[:12] or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance_id}'
