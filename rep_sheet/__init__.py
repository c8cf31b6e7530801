"""
RepSheet — Реперторний аналіз для гомеопатичної консультації

Клініцист збирає рубрики (симптоми) з результатів пошуку по реперторію,
задає кожній важливість, а система оцінює та ранжує препарати.

Модулі:
- config: Конфігурація системи
- schemas: Рубрики, препарати, агрегати
- case: Кейс (набір вибраних рубрик)
- analysis: Оцінка, рейтинг, реперторний лист
- export: Текстовий експорт
- search: Клієнт сервісу пошуку по реперторію
- api: Backend API
"""

__version__ = "0.1.0"

from .config import RepSheetConfig, get_default_config
