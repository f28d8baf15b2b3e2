"""SIP traffic counters with Prometheus text export."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field


@dataclass
class Metrics:
    """Thread-safe SIP counters."""

    sip_requests_total: int = 0
    sip_responses_total: int = 0
    sip_errors_total: int = 0
    register_requests: int = 0
    invite_requests: int = 0
    active_sessions: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def _bump(self, name: str) -> None:
        with self._lock:
            setattr(self, name, getattr(self, name) + 1)

    def increment_requests(self) -> None:
        self._bump("sip_requests_total")

    def increment_responses(self) -> None:
        self._bump("sip_responses_total")

    def increment_errors(self) -> None:
        self._bump("sip_errors_total")

    def increment_register(self) -> None:
        self._bump("register_requests")

    def increment_invite(self) -> None:
        self._bump("invite_requests")

    def export_prometheus(self) -> str:
        """Render all metrics in the Prometheus text exposition format."""
        with self._lock:
            values = (
                self.sip_requests_total,
                self.sip_responses_total,
                self.sip_errors_total,
                self.register_requests,
                self.invite_requests,
                self.active_sessions,
            )
        return (
            "# HELP cynan_sip_requests_total Total number of SIP requests\n"
            "# TYPE cynan_sip_requests_total counter\n"
            f"cynan_sip_requests_total {values[0]}\n"
            "# HELP cynan_sip_responses_total Total number of SIP responses\n"
            "# TYPE cynan_sip_responses_total counter\n"
            f"cynan_sip_responses_total {values[1]}\n"
            "# HELP cynan_sip_errors_total Total number of SIP errors\n"
            "# TYPE cynan_sip_errors_total counter\n"
            f"cynan_sip_errors_total {values[2]}\n"
            "# HELP cynan_register_requests Total number of REGISTER requests\n"
            "# TYPE cynan_register_requests counter\n"
            f"cynan_register_requests {values[3]}\n"
            "# HELP cynan_invite_requests Total number of INVITE requests\n"
            "# TYPE cynan_invite_requests counter\n"
            f"cynan_invite_requests {values[4]}\n"
            "# HELP cynan_active_sessions Current number of active sessions\n"
            "# TYPE cynan_active_sessions gauge\n"
            f"cynan_active_sessions {values[5]}\n"
        )