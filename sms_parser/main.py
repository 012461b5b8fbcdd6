import asyncio
import signal

from common.logger import Level, Logger
from sms_parser.classifier import DebitSmsMatcher
from sms_parser.config import load_config
from sms_parser.policy import NotifyPolicy
from sms_parser.service import LoggingSink, SmsIngestService
from sms_parser.sources import HttpSmsGatewaySource


def main() -> None:
    Logger.configure("sms-ingest", level=Level.INFO)
    Logger.silence("httpx", "httpcore", level=Level.WARNING)

    cfg = load_config()
    source = HttpSmsGatewaySource(
        base_url=cfg.gateway_url,
        token=cfg.gateway_token,
        max_messages=cfg.max_messages,
        verify_tls=cfg.gateway_verify_tls,
    )
    service = SmsIngestService(
        sources=[source],
        matchers=[DebitSmsMatcher()],
        sink=LoggingSink(),
        policy=NotifyPolicy(
            min_amount=cfg.min_notify_amount,
            debounce_ms=cfg.merchant_debounce_seconds * 1000,
        ),
        poll_interval_seconds=cfg.poll_interval_seconds,
        lookback_minutes=cfg.lookback_minutes,
    )

    async def _run() -> None:
        stop_event = asyncio.Event()
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, stop_event.set)
        try:
            await service.run_forever(stop_event)
        finally:
            await source.aclose()

    asyncio.run(_run())


if __name__ == "__main__":
    main()
