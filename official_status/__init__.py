"""
Official Status Probe

Layer Structure:
- Domain: Health vocabulary, probe failures and indicator classification
- Application: Use cases and DTOs
- Infrastructure: Status page HTTP probe and log sink
- Presentation: FastAPI controllers
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, entry points and configuration
"""

__version__ = "1.0.0"
