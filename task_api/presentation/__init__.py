# task_api/presentation/__init__.py

"""
Слой presentation — входная точка системы.
Здесь живут HTTP-роуты (FastAPI) и use-case'ы с их командами и результатами.
"""

__all__ = [
    "http",
    "usecases",
]
