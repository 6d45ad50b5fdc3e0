"""
Shared module package.

Contains cross-cutting concerns:
- Error handling and mapping
- Authentication and security middleware
- Rate limiting
- Logging configuration
"""
