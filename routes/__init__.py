"""
Модуль: `routes/__init__.py`.
Назначение: Пакет маршрутов приложения (регистрация через register_routes(app)).
"""
