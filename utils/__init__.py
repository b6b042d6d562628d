"""
Модуль: `utils/__init__.py`.
Назначение: Вспомогательные модули: проверка изображений, публичное хранилище, очистка.
"""
