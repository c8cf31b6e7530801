#!/usr/bin/env python3
"""
RepSheet — Аналіз кейсу з JSON файлу

Вхідний файл: список результатів пошуку (формат сервісу пошуку),
опціонально з полем "importance" у кожному елементі.

Запуск:
    python scripts/analyze_case.py case.json
    python scripts/analyze_case.py case.json --repertory kent --top 10
    python scripts/analyze_case.py case.json --out exports/
"""

import argparse
import json
import sys
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from rep_sheet.analysis import RepertorySheet
from rep_sheet.config import load_config, get_default_config
from rep_sheet.errors import ExportWriteError, InvalidImportanceError
from rep_sheet.export import ExportMetadata, export_filename, write_export
from rep_sheet.logging_conf import setup_logging
from rep_sheet.schemas import RubricResult
from rep_sheet.search import repertory_label


def main():
    parser = argparse.ArgumentParser(description='RepSheet — repertory sheet analysis')
    parser.add_argument('case', help='JSON file with rubric results')
    parser.add_argument('--repertory', default='publicum', help='Repertory code')
    parser.add_argument('--top', type=int, default=None, help='Top N remedies')
    parser.add_argument('--config', default=None, help='YAML config')
    parser.add_argument('--out', default=None, help='Directory for the text export')
    parser.add_argument('--log-level', default='WARNING', help='Log level')

    args = parser.parse_args()
    setup_logging(args.log_level)

    config = load_config(args.config) if args.config else get_default_config()
    sheet = RepertorySheet(config=config)

    with open(args.case, 'r', encoding='utf-8') as f:
        items = json.load(f)

    for i, item in enumerate(items, start=1):
        try:
            rubric = RubricResult.model_validate(item)
        except ValidationError as e:
            print(f"⚠️ Item {i}: invalid rubric, skipped ({e.error_count()} errors)")
            continue

        sheet.add_rubric(rubric)
        if "importance" in item:
            try:
                sheet.set_importance(rubric.id, item["importance"])
            except InvalidImportanceError as e:
                print(f"⚠️ {rubric.full_path}: {e.message}")

    print("=" * 60)
    print(f"📋 RepSheet — {sheet.case.n_rubrics} rubrics, {len(sheet.aggregates)} remedies")
    print("=" * 60)

    for i, agg in enumerate(sheet.top(args.top), start=1):
        print(
            f"{i:3d}. {agg.label:<10} {agg.total_score:>4}  "
            f"{agg.occurrences}/{sheet.case.n_rubrics}  "
            f"{agg.coverage_percent:>3}%  {sheet.band_for(agg).value}"
        )

    if args.out:
        today = date.today()
        text = sheet.export(
            ExportMetadata(export_date=today, repertory_name=repertory_label(args.repertory)),
            top_n=args.top,
        )
        path = Path(args.out) / export_filename(today, config.export.filename_prefix)
        try:
            write_export(text, path)
        except ExportWriteError as e:
            print(f"❌ {e.message}")
            sys.exit(1)
        print(f"\n✅ Saved to: {path}")


if __name__ == "__main__":
    main()
