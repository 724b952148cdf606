"""
Review generation fallback router.

Resolves every request through Cache -> experiment gate -> Primary ->
Secondary -> Template -> Emergency and always returns a result.

Sandi Metz Principles:
- Single Responsibility: Fallback orchestration
- Small methods: Each stage isolated
- Dependency Injection: Providers, cache and monitoring injected
"""

import asyncio
import contextlib
import time
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional

from reviewgen.cache.request_cache import RequestCache
from reviewgen.composer.emergency import emergency_text
from reviewgen.composer.template_composer import (
    DeterministicTemplateComposer,
    TemplateComposer,
)
from reviewgen.config import AppConfig
from reviewgen.exceptions import ComposerError
from reviewgen.experiments.ab_assigner import ARM_TEMPLATE, ABAssigner
from reviewgen.llm.cost_calculator import CostCalculator
from reviewgen.llm.factory import ProviderFactory
from reviewgen.llm.provider import BaseProviderClient
from reviewgen.models.request import GenerationRequest
from reviewgen.models.result import GenerationResult, GenerationSource, ProviderResponse
from reviewgen.monitoring.alerts import AlertEvaluator
from reviewgen.monitoring.cost_meter import CostMeter
from reviewgen.monitoring.metrics import MetricsRecorder
from reviewgen.monitoring.store import MetricsStore, create_metrics_store
from reviewgen.utils.logger import (
    bind_request_id,
    get_logger,
    log_error,
    unbind_request_id,
)

logger = get_logger(__name__)

PRIMARY_SLOT = "primary"
SECONDARY_SLOT = "secondary"

SUCCESS_SOURCES = (
    GenerationSource.CACHE,
    GenerationSource.PRIMARY,
    GenerationSource.SECONDARY,
)


def generate_request_id() -> str:
    """
    Generate request identifier.

    Returns:
        Identifier like req_1718000000000_a1b2c3d4e
    """
    return f"req_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


@dataclass
class _RequestTrace:
    """Mutable per-request progress."""

    text: str = ""
    source: Optional[GenerationSource] = None
    cost: float = 0.0
    arm: Optional[str] = None
    failed: bool = False

    def resolve(self, text: str, source: GenerationSource, cost: float = 0.0) -> None:
        self.text = text
        self.source = source
        self.cost = cost


class FallbackRouter:
    """
    Fallback chain state machine.

    Provider failures are logged and counted, never raised to the
    caller. Only provider results are cached.
    """

    def __init__(
        self,
        primary: Optional[BaseProviderClient],
        secondary: Optional[BaseProviderClient],
        cache: Optional[RequestCache] = None,
        composer: Optional[TemplateComposer] = None,
        metrics: Optional[MetricsRecorder] = None,
        cost_meter: Optional[CostMeter] = None,
        alert_evaluator: Optional[AlertEvaluator] = None,
        ab_assigner: Optional[ABAssigner] = None,
        store: Optional[MetricsStore] = None,
        sweep_interval_seconds: float = 3600,
        checkpoint_interval_seconds: float = 60,
    ):
        """
        Initialize router.

        Args:
            primary: Primary slot provider (None = disabled)
            secondary: Secondary slot provider (None = disabled)
            cache: Review cache
            composer: Template composer
            metrics: Metrics recorder
            cost_meter: Cost meter for the primary slot
            alert_evaluator: Alert evaluator (None = alerting disabled)
            ab_assigner: Experiment gate (None = gate disabled)
            store: Metrics persistence (None = no checkpoints)
            sweep_interval_seconds: Expired cache entry sweep interval
            checkpoint_interval_seconds: Metrics save interval
        """
        self._primary = primary
        self._secondary = secondary
        self._cache = cache or RequestCache()
        self._composer = composer or DeterministicTemplateComposer()
        self._metrics = metrics or MetricsRecorder()
        self._cost_meter = cost_meter or CostMeter(
            primary.config.cost_per_unit if primary else 0.0, metrics=self._metrics
        )
        self._alerts = alert_evaluator
        self._ab = ab_assigner
        self._store = store
        self._sweep_interval = sweep_interval_seconds
        self._checkpoint_interval = checkpoint_interval_seconds
        self._tasks: list[asyncio.Task] = []

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Generate a review, falling back until a stage succeeds.

        Args:
            request: Generation request

        Returns:
            Result from exactly one terminal stage
        """
        start_time = time.perf_counter()
        request_id = generate_request_id()
        bind_request_id(request_id)
        self._metrics.record("requests.total")
        trace = _RequestTrace()

        try:
            await self._run_chain(request, trace)
        finally:
            latency_ms = (time.perf_counter() - start_time) * 1000
            self._record_completion(trace, latency_ms)
            unbind_request_id()

        logger.info(
            "Review generated",
            request_id=request_id,
            source=trace.source.value,
            latency_ms=round(latency_ms, 2),
        )
        return GenerationResult(
            text=trace.text,
            source=trace.source,
            latency_ms=latency_ms,
            request_id=request_id,
            cached=trace.source == GenerationSource.CACHE,
            cost_estimate=trace.cost,
            experiment_arm=trace.arm,
        )

    async def _run_chain(self, request: GenerationRequest, trace: _RequestTrace) -> None:
        """Walk the stages until one resolves the trace."""
        cached = await self._check_cache(request)
        if cached:
            trace.resolve(cached, GenerationSource.CACHE)
            return

        if not self._passes_experiment_gate(trace):
            self._compose_fallback(request, trace)
            return

        for slot, provider, source in (
            (PRIMARY_SLOT, self._primary, GenerationSource.PRIMARY),
            (SECONDARY_SLOT, self._secondary, GenerationSource.SECONDARY),
        ):
            response = await self._try_provider(slot, provider, request, trace)
            if response is not None:
                await self._cache.store(request, response.text)
                cost = self._record_provider_success(slot, provider, response)
                trace.resolve(response.text, source, cost)
                return

        self._compose_fallback(request, trace)

    async def _check_cache(self, request: GenerationRequest) -> Optional[str]:
        """Look up request and count hit or miss."""
        if not self._cache.enabled:
            return None

        cached = await self._cache.lookup(request)
        self._metrics.record("cache.hits" if cached else "cache.misses")
        return cached

    def _passes_experiment_gate(self, trace: _RequestTrace) -> bool:
        """Draw the experiment arm when the gate is enabled."""
        if self._ab is None:
            return True

        trace.arm = self._ab.assign()
        self._metrics.record(f"experiments.{trace.arm}")
        return trace.arm != ARM_TEMPLATE

    async def _try_provider(
        self,
        slot: str,
        provider: Optional[BaseProviderClient],
        request: GenerationRequest,
        trace: _RequestTrace,
    ) -> Optional[ProviderResponse]:
        """
        Call one provider slot.

        Args:
            slot: Slot name (primary, secondary)
            provider: Provider in the slot
            request: Generation request
            trace: Request progress

        Returns:
            Provider response, or None if skipped or failed
        """
        if provider is None or not provider.is_available():
            logger.debug("Provider slot skipped", slot=slot)
            return None

        try:
            return await provider.generate(request)
        except Exception as e:
            log_error(e, f"{slot} provider failed", provider=provider.get_name())
            self._metrics.record(f"provider.{slot}.errors")
            trace.failed = True
            return None

    def _record_provider_success(
        self, slot: str, provider: BaseProviderClient, response: ProviderResponse
    ) -> float:
        """Count success and accrue cost; returns the cost estimate."""
        self._metrics.record(f"provider.{slot}.success")
        if slot != PRIMARY_SLOT:
            return 0.0

        self._metrics.record("provider.primary.units", response.units)
        self._cost_meter.track_cost(slot, response.units)
        calculator = CostCalculator(provider.config.cost_per_unit)
        return calculator.estimate(response.units, response.text)

    def _compose_fallback(self, request: GenerationRequest, trace: _RequestTrace) -> None:
        """Resolve with template text, or emergency text if the composer fails."""
        try:
            text = self._composer.compose(request)
            if not text or not text.strip():
                raise ComposerError("Template composer returned empty text")
        except Exception as e:
            log_error(e, "Template composer failed")
            self._metrics.record("fallback.emergency")
            self._metrics.record("errors.total")
            trace.failed = True
            trace.resolve(emergency_text(request), GenerationSource.EMERGENCY)
            return

        self._metrics.record("fallback.template")
        trace.resolve(text, GenerationSource.TEMPLATE)

    def _record_completion(self, trace: _RequestTrace, latency_ms: float) -> None:
        """Record request outcome and evaluate alerts."""
        self._metrics.record("latency", latency_ms)
        if trace.source in SUCCESS_SOURCES:
            self._metrics.record("requests.success")
        if trace.failed or trace.source is None:
            self._metrics.record("requests.errors")

        if self._alerts is None:
            return
        try:
            self._alerts.evaluate(self._metrics, self._cost_meter)
        except Exception as e:
            log_error(e, "Alert evaluation failed")

    def metrics_summary(self) -> Dict[str, Any]:
        """Get metrics summary with current cost buckets."""
        summary = self._metrics.summary()
        summary["cost"] = {
            "daily": self._cost_meter.today_cost(),
            "monthly": self._cost_meter.month_cost(),
            "total": self._cost_meter.total,
        }
        return summary

    async def cache_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        return await self._cache.stats()

    async def clear_cache(self) -> None:
        """Remove every cached review."""
        await self._cache.clear()
        logger.info("Review cache cleared")

    def availability(self) -> Dict[str, bool]:
        """Get which stages can currently serve requests."""
        return {
            PRIMARY_SLOT: bool(self._primary and self._primary.is_available()),
            SECONDARY_SLOT: bool(self._secondary and self._secondary.is_available()),
            "template": True,
        }

    async def start(self) -> None:
        """Restore metrics and start background sweep and checkpoint tasks."""
        await self.restore_metrics()
        self._tasks = [asyncio.create_task(self._sweep_loop())]
        if self._store is not None:
            self._tasks.append(asyncio.create_task(self._checkpoint_loop()))
        logger.info("Fallback router started", tasks=len(self._tasks))

    async def stop(self) -> None:
        """Cancel background tasks and write a final checkpoint."""
        for task in self._tasks:
            task.cancel()
        for task in self._tasks:
            with contextlib.suppress(asyncio.CancelledError):
                await task
        self._tasks = []
        await self.checkpoint()
        logger.info("Fallback router stopped")

    async def restore_metrics(self) -> None:
        """Load metrics and cost buckets from the store."""
        if self._store is None:
            return

        snapshot = await self._store.load()
        if not snapshot:
            return
        if not isinstance(snapshot, dict):
            logger.warning(
                "Ignoring malformed metrics snapshot", kind=type(snapshot).__name__
            )
            return
        self._metrics.restore(snapshot.get("metrics"))
        self._cost_meter.restore(snapshot.get("costs"))

    async def checkpoint(self) -> None:
        """Save metrics and cost buckets to the store."""
        if self._store is None:
            return

        await self._store.save(
            {"metrics": self._metrics.snapshot(), "costs": self._cost_meter.snapshot()}
        )

    async def _sweep_loop(self) -> None:
        while True:
            await asyncio.sleep(self._sweep_interval)
            removed = await self._cache.sweep()
            logger.debug("Cache sweep finished", removed=removed)

    def report_metrics(self) -> Dict[str, Any]:
        """Log the current metrics summary and return it."""
        summary = self.metrics_summary()
        logger.info("Metrics report", **summary)
        return summary

    async def _checkpoint_loop(self) -> None:
        while True:
            await asyncio.sleep(self._checkpoint_interval)
            await self.checkpoint()
            self.report_metrics()

    @property
    def metrics(self) -> MetricsRecorder:
        """Get metrics recorder."""
        return self._metrics

    @property
    def cost_meter(self) -> CostMeter:
        """Get cost meter."""
        return self._cost_meter


def build_router(app_config: AppConfig) -> FallbackRouter:
    """
    Build a router wired from configuration.

    Args:
        app_config: Application configuration

    Returns:
        Configured router
    """
    factory = ProviderFactory(app_config)
    primary = factory.create_primary()
    metrics = MetricsRecorder()

    alert_evaluator = None
    if app_config.monitoring_enabled:
        alert_evaluator = AlertEvaluator(
            thresholds=app_config.alert_thresholds(),
            cooldown_seconds=app_config.alert_cooldown_seconds,
        )

    ab_assigner = None
    if app_config.ab_testing_enabled:
        ab_assigner = ABAssigner(llm_percentage=app_config.ab_llm_percentage)

    return FallbackRouter(
        primary=primary,
        secondary=factory.create_secondary(),
        cache=RequestCache(
            ttl_seconds=app_config.cache_ttl_seconds,
            max_size=app_config.cache_max_size,
            enabled=app_config.cache_enabled,
        ),
        metrics=metrics,
        cost_meter=CostMeter(primary.config.cost_per_unit, metrics=metrics),
        alert_evaluator=alert_evaluator,
        ab_assigner=ab_assigner,
        store=create_metrics_store(app_config),
        sweep_interval_seconds=app_config.cache_sweep_interval_seconds,
        checkpoint_interval_seconds=app_config.metrics_checkpoint_interval_seconds,
    )
