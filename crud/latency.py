import asyncio
from config.settings import settings


async def simulate_latency(milliseconds: int) -> None:
    """Pause like a real network round trip would; 0 disables the delay."""
    if milliseconds > 0:
        await asyncio.sleep(milliseconds / 1000)


async def query_delay() -> None:
    await simulate_latency(settings.query_delay_ms)


async def mutation_delay() -> None:
    await simulate_latency(settings.mutation_delay_ms)
