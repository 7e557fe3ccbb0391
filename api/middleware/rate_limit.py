import time
from fastapi import Request
from fastapi.responses import JSONResponse
import logging
from cachetools import TTLCache

logger = logging.getLogger("rate_limiter")

EXEMPT_PATHS = ("/health",)


class RateLimitMiddleware:
    """
    Simple in-memory rate limiter: sliding one-minute window per client IP.
    Memory-bounded by TTLCache; idle clients expire with the window.
    """
    def __init__(self, requests_per_minute: int = 60):
        self.rate_limit = requests_per_minute
        self.window_size = 60 # seconds
        self.clients = TTLCache(maxsize=10000, ttl=self.window_size) # IP -> list of timestamps

    @staticmethod
    def client_ip(request: Request):
        # 1. x-forwarded-for (standard proxy header)
        x_forwarded = request.headers.get("x-forwarded-for")
        if x_forwarded:
            return x_forwarded.split(",")[0].strip()
        # 2. x-real-ip (nginx/others)
        if request.headers.get("x-real-ip"):
            return request.headers.get("x-real-ip").strip()
        # 3. Direct client host
        if request.client and request.client.host:
            return request.client.host
        return None

    async def __call__(self, request: Request, call_next):
        if request.url.path in EXEMPT_PATHS or request.method == "OPTIONS":
            return await call_next(request)

        client_ip = self.client_ip(request)
        if not client_ip:
            # Reject unknown clients to prevent bucket sharing
            logger.warning("Rate limit skipped due to missing client IP (blocking request)")
            return JSONResponse(
                status_code=400,
                content={"detail": "Client IP required for rate limiting."}
            )

        # No await between read and write, so no lock is needed on one event loop
        current_time = time.time()
        history = [t for t in self.clients.get(client_ip, []) if t > current_time - self.window_size]

        if len(history) >= self.rate_limit:
            self.clients[client_ip] = history
            logger.warning(f"Rate limit exceeded for IP: {client_ip}")
            return JSONResponse(
                status_code=429,
                content={"detail": "Too many requests. Please try again later."}
            )

        history.append(current_time)
        self.clients[client_ip] = history # Updates entry and resets TTL

        return await call_next(request)
