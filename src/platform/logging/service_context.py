"""
Service identification bound into every log line.

Format: ``<SERVICE_NAME>@<DEPLOY_ENV>:<instance>`` where the instance is the
container hostname when running in a container, otherwise the process id.
"""

from functools import lru_cache
import os


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'flight-booking')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # HOSTNAME is the short container id under docker/k8s
    instance = os.getenv('HOSTNAME', '')[:12] if os.getenv('CONTAINER') else ''
    if not instance:
        instance = str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
