"""Errors raised by the scoring engine."""


class InsufficientAnalysisError(Exception):
    """Raised when fewer domain analyzers succeeded than the configured minimum.

    This is the only analysis failure visible to callers. Individual analyzer
    failures are absorbed by the orchestrator and only surface here, through
    ``failed_domains``, when too many of them happened in one run.

    Args:
        succeeded: Number of analyzers that returned a score.
        required: Configured minimum number of successful analyzers.
        failed_domains: Domains whose analyzer raised, in registration order.
    """

    def __init__(
        self,
        succeeded: int,
        required: int,
        failed_domains: list[str] | tuple[str, ...],
    ) -> None:
        self.succeeded = succeeded
        self.required = required
        self.failed_domains = tuple(failed_domains)
        failed = ", ".join(self.failed_domains) or "none"
        super().__init__(
            f"Insufficient analysis: {succeeded} domain(s) succeeded, "
            f"{required} required (failed: {failed})"
        )
