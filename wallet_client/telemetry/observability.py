"""Optional OpenTelemetry metrics for gRPC calls.

Enabled with --gcp_client_project. The OpenTelemetry SDK and
grpcio-observability are imported lazily so the client runs without them.
"""

from wallet_client.logging.structured import get_logger

EXPORT_INTERVAL_MILLIS = 5000

logger = get_logger("telemetry")

_plugin = None
_provider = None


def _build_plugin(project_id: str):
    # Lazy import to avoid pulling in the OpenTelemetry stack when telemetry is off
    import grpc_observability
    from opentelemetry.sdk.metrics import MeterProvider
    from opentelemetry.sdk.metrics.export import ConsoleMetricExporter, PeriodicExportingMetricReader
    from opentelemetry.sdk.resources import Resource

    reader = PeriodicExportingMetricReader(
        exporter=ConsoleMetricExporter(),
        export_interval_millis=EXPORT_INTERVAL_MILLIS,
    )
    provider = MeterProvider(
        metric_readers=[reader],
        resource=Resource.create({"gcp.project_id": project_id, "service.name": "wallet-client"}),
    )
    return grpc_observability.OpenTelemetryPlugin(meter_provider=provider), provider


def register_exporters(project_id: str) -> None:
    """Register the global gRPC metrics plugin for `project_id`."""
    global _plugin, _provider
    if _plugin is not None:
        return
    try:
        _plugin, _provider = _build_plugin(project_id)
    except ImportError as e:
        logger.warning(
            "Telemetry unavailable, install wallet-client[telemetry]",
            extra={"log_data": {"project_id": project_id, "missing": e.name or str(e)}},
        )
        return
    _plugin.register_global()
    logger.info("Telemetry registered", extra={"log_data": {"project_id": project_id}})


def flush() -> None:
    """Deregister the plugin and shut down the provider, exporting pending metrics."""
    global _plugin, _provider
    if _plugin is None:
        return
    _plugin.deregister_global()
    _provider.shutdown()
    _plugin, _provider = None, None
    logger.info("Telemetry flushed")
