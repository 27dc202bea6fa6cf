"""
Services Layer

Pure business logic services that:
- Accept domain inputs (IDs, models, a record store)
- Return domain outputs (models) or raise typed ``VacationError``s
- Do NOT depend on HTTP request/response objects
"""
