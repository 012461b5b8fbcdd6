from __future__ import annotations

import asyncio
import time
from typing import Iterable, Optional, Protocol

from common.logger import Logger
from sms_parser.classifier import TransactionMatcher
from sms_parser.formatting import format_amount
from sms_parser.policy import NotifyPolicy
from sms_parser.sources import MessageSource
from sms_parser.types import ParsedTransaction, RawMessage


class TransactionSink(Protocol):
    async def deliver(self, tx: ParsedTransaction, *, notify: bool) -> None:
        ...


class LoggingSink:
    async def deliver(self, tx: ParsedTransaction, *, notify: bool) -> None:
        Logger.info(
            "Debit %s merchant=%s at=%d notify=%s",
            format_amount(tx.amount),
            tx.merchant,
            tx.timestamp,
            notify,
        )


def _now_ms() -> int:
    return int(time.time() * 1000)


class SmsIngestService:
    def __init__(
        self,
        *,
        sources: Iterable[MessageSource],
        matchers: Iterable[TransactionMatcher],
        sink: TransactionSink,
        policy: Optional[NotifyPolicy] = None,
        poll_interval_seconds: int = 5,
        lookback_minutes: int = 15,
    ) -> None:
        self._sources = list(sources)
        self._matchers = list(matchers)
        self._sink = sink
        self._policy = policy or NotifyPolicy()
        self._poll_interval_seconds = poll_interval_seconds
        self._lookback_ms = lookback_minutes * 60 * 1000
        # fingerprint -> wall clock ms when first seen
        self._seen: dict[tuple[str, int, str], int] = {}

    async def run_forever(self, stop_event: asyncio.Event | None = None) -> None:
        while stop_event is None or not stop_event.is_set():
            try:
                await self.run_once()
            except Exception:
                Logger.exception("SMS ingest loop failed")
            if stop_event is None:
                await asyncio.sleep(self._poll_interval_seconds)
            else:
                try:
                    await asyncio.wait_for(stop_event.wait(), timeout=self._poll_interval_seconds)
                except asyncio.TimeoutError:
                    pass

    async def run_once(self) -> int:
        """Process one polling round; returns the number of debits delivered."""
        since = _now_ms() - self._lookback_ms
        delivered = 0

        for source in self._sources:
            messages = await source.fetch_messages(since=since)
            Logger.info("Fetched %d messages from %s", len(messages), type(source).__name__)
            for msg in messages:
                if self._is_seen(msg):
                    continue
                tx = self._match_message(msg)
                if tx is None:
                    self._mark_seen(msg)
                    continue
                notify = self._policy.should_notify(tx)
                try:
                    await self._sink.deliver(tx, notify=notify)
                except Exception:
                    # leave the sms unseen so the next poll retries it
                    if notify:
                        self._policy.forget(tx.merchant)
                    raise
                self._mark_seen(msg)
                delivered += 1

        if delivered:
            Logger.info("Delivered debits: %d", delivered)
        return delivered

    def _match_message(self, msg: RawMessage) -> ParsedTransaction | None:
        for matcher in self._matchers:
            tx = matcher.match(msg)
            if tx is not None:
                return tx
        return None

    @staticmethod
    def _fingerprint(msg: RawMessage) -> tuple[str, int, str]:
        return (msg.sender, msg.received_at, msg.body)

    def _is_seen(self, msg: RawMessage) -> bool:
        self._prune_seen(_now_ms())
        return self._fingerprint(msg) in self._seen

    def _mark_seen(self, msg: RawMessage) -> None:
        self._seen[self._fingerprint(msg)] = _now_ms()

    def _prune_seen(self, now: int) -> None:
        # a source never returns messages older than the lookback, so older keys can go
        cutoff = now - 2 * self._lookback_ms
        stale = [key for key, ts in self._seen.items() if ts < cutoff]
        for key in stale:
            del self._seen[key]
