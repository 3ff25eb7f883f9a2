"""
Operational/Infrastructure endpoints
These endpoints are used by monitoring systems, load balancers, and DevOps tools
"""

import os
import sys
import time
from datetime import datetime, UTC

import psutil
from fastapi import Request

from src.core.config import config

start_time = time.time()


def health(request: Request):
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": config.service_name,
        "timestamp": datetime.now(UTC).isoformat(),
        "version": config.api_version,
    }


def readiness(request: Request):
    """Readiness probe - the service holds no external connections, so it is ready once started"""
    return {
        "status": "ready",
        "service": config.service_name,
        "timestamp": datetime.now(UTC).isoformat(),
        "checks": {},
    }


def liveness(request: Request):
    """Liveness probe - check if the app is running"""
    return {
        "status": "alive",
        "service": config.service_name,
        "timestamp": datetime.now(UTC).isoformat(),
        "uptime": time.time() - start_time,
    }


def metrics(request: Request):
    """Basic process metrics endpoint"""
    process = psutil.Process()
    memory_info = process.memory_info()

    return {
        "service": config.service_name,
        "timestamp": datetime.now(UTC).isoformat(),
        "metrics": {
            "uptime": time.time() - start_time,
            "memory": {
                "rss": memory_info.rss,
                "vms": memory_info.vms,
            },
            "cpu_percent": process.cpu_percent(),
            "pid": os.getpid(),
            "python_version": sys.version,
        },
    }
