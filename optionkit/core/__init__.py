"""
Core domain models, contracts and errors.

Не зависит от внешних систем: только pydantic (модели) и jsonschema (контракты).
"""
