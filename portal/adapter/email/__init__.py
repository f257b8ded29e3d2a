"""Outbound email adapters."""

from .sender import MockEmailSender, SmtpEmailSender

__all__ = ["MockEmailSender", "SmtpEmailSender"]
