"""Infrastructure modules for the view translation engine.

Centralized infrastructure components:
- configuration: Settings management (Settings, TranslationSettings, AwsSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Languages, plural rules, interpolation, translation cache and service
- persistence: Translation stores (in-memory, DynamoDB) and maintenance helpers
- services: Application-scoped providers (get_settings, get_translation_service)
"""
