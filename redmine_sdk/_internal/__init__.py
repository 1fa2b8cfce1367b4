"""Internal modules for Redmine SDK.

WARNING: These are implementation details of RedmineClient and may change
without notice. They are not intended for direct use in application code.

Modules:
    http - Shared HTTP client configuration
    transport - Request sending and status checking
    codec - Date/time formats and zero-value omission
    redaction - Secret redaction for debug logs
"""
