"""Infrastructure modules for the translation editor.

Centralized infrastructure components:
- configuration: Settings management (Settings, EditorSettings, ServerSettings)
- i18n: Translation resource synchronization engine
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation results (OperationResult, OperationStatus)
- services: Dependency injection services (SettingsDep, TranslationServiceDep)
"""
