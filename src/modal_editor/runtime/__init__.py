"""Driver loop, panic hook and telemetry services."""
