"""Example app that echoes the caller's resolved IP address.

Trusts proxy headers from private networks (docker, k8s, local nginx).

Run:  PORT=3000 python main.py
"""

import os

import uvicorn
from fastapi import Depends, FastAPI

from clientip import ProxyConfig, ip_version
from clientip.integrations.fastapi import create_client_ip_dep

proxy_config = ProxyConfig.from_trusted_proxies(
    ["127.0.0.0/8", "10.0.0.0/8", "172.16.0.0/12", "192.168.0.0/16", "::1"],
)
client_ip = create_client_ip_dep(proxy_config)

app = FastAPI(title="clientip echo")


@app.get("/")
async def whoami(ip: str | None = Depends(client_ip)):
    return {"address": ip, "family": f"IPv{ip_version(ip)}" if ip else None}


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", "3000")))
