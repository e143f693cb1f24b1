"""
Audit logging module
Append-only record of every registration operation
"""

from .audit_log import AuditLog

__all__ = ['AuditLog']
