#!/usr/bin/env python3
import argparse
import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
BACKEND_DIR = ROOT / 'backend'


def main() -> int:
    parser = argparse.ArgumentParser(description='Run the blog routing API locally.')
    parser.add_argument('--port', type=int, default=8001)
    parser.add_argument('--demo-tenant', default='demo', help='Tenant label seeded on startup (empty to skip).')
    args = parser.parse_args()

    env = os.environ.copy()
    env.setdefault('DATABASE_URL', f'sqlite:///{ROOT / "dev.db"}')
    if args.demo_tenant:
        env.setdefault('DEMO_TENANT_LABEL', args.demo_tenant)

    cmd = [
        sys.executable,
        '-m',
        'uvicorn',
        'newsai.main:app',
        '--host',
        '0.0.0.0',
        '--port',
        str(args.port),
        '--reload',
    ]
    # Try http://<label>.localhost:<port>/api/v1/routing/resolve for subdomain routing.
    try:
        return subprocess.call(cmd, cwd=str(BACKEND_DIR), env=env)
    except KeyboardInterrupt:
        return 0


if __name__ == '__main__':
    raise SystemExit(main())
