# src/apps/core/services/export_service.py
"""
Export Service

Renders the MOT refund report as CSV or Excel.
"""

import io
import csv
import logging
from decimal import Decimal
from typing import Any, Dict, List

import openpyxl
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side
from openpyxl.utils import get_column_letter

from common.constants import FORMAT_CSV, FORMAT_EXCEL

logger = logging.getLogger(__name__)


REPORT_HEADERS = [
    'Flight Date',
    'Aircraft',
    'Route',
    'Client',
    'Owner',
    'Management Company',
    'Fuel (Liters)',
    'MOT Paid',
]

CONTENT_TYPES = {
    FORMAT_CSV: 'text/csv',
    FORMAT_EXCEL: 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
}


def format_quantity(value: Decimal) -> str:
    """Plain number without trailing zeros (2500.00 -> 2500, 12.50 -> 12.5)."""
    return f"{Decimal(value).normalize():f}"


def format_money(value: Decimal) -> str:
    return f"{Decimal(value):.2f}"


class ExportService:
    """Service for exporting the MOT refund report."""

    @classmethod
    def export(cls, report: Dict[str, Any], format: str) -> Dict[str, Any]:
        """
        Export a generated report.

        Args:
            report: Output of ReportService.generate_mot_report
            format: csv or xlsx

        Returns:
            Dict with content (bytes), filename and content_type

        Raises:
            ExportError: If the format is not supported or rendering fails
        """
        from . import ExportError

        if format not in CONTENT_TYPES:
            raise ExportError(f"Unsupported format: {format}", code='UNSUPPORTED_FORMAT')

        try:
            if format == FORMAT_CSV:
                content = cls._export_csv(report).encode('utf-8')
            else:
                content = cls._export_excel(report)
        except Exception as e:
            logger.error(f"Export failed: {e}", exc_info=True)
            raise ExportError(str(e))

        filename = cls.get_filename(report, format)
        logger.info(f"Exported {filename} ({len(content)} bytes)")

        return {
            'content': content,
            'filename': filename,
            'content_type': CONTENT_TYPES[format],
        }

    @staticmethod
    def get_filename(report: Dict[str, Any], extension: str) -> str:
        return (
            f"mot-refund-report-{report['start_date'].isoformat()}"
            f"-to-{report['end_date'].isoformat()}.{extension}"
        )

    @staticmethod
    def report_row_values(row: Dict[str, Any]) -> List[str]:
        """One report row as CSV cells, in header order."""
        return [
            row['flight_date'].isoformat(),
            row['tail_number'],
            f"{row['departure']}-{row['arrival']}",
            row['client_name'] or '',
            row['owner_name'] or '',
            row['management_company_name'] or '',
            format_quantity(row['fuel_liters']),
            format_money(row['mot_amount_paid']),
        ]

    @classmethod
    def _export_csv(cls, report: Dict[str, Any]) -> str:
        """Export to CSV: header, one line per flight, blank line, totals."""
        output = io.StringIO()
        writer = csv.writer(output, lineterminator='\n')

        writer.writerow(REPORT_HEADERS)
        for row in report['rows']:
            writer.writerow(cls.report_row_values(row))

        writer.writerow([])
        writer.writerow(['Total Flights', report['total_flights']])
        writer.writerow(['Total Fuel (Liters)', format_quantity(report['total_fuel_liters'])])
        writer.writerow(['Total MOT Refund', f"${format_money(report['total_mot_paid'])}"])

        return output.getvalue()

    @classmethod
    def _export_excel(cls, report: Dict[str, Any]) -> bytes:
        """Export to Excel with a styled header row and a totals block."""
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = 'MOT Refund Report'

        # Styles
        header_font = Font(bold=True, color='FFFFFF')
        header_fill = PatternFill(start_color='4472C4', end_color='4472C4', fill_type='solid')
        thin_border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )

        # Headers
        for col_idx, header in enumerate(REPORT_HEADERS, 1):
            cell = ws.cell(row=1, column=col_idx)
            cell.value = header
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = Alignment(horizontal='center')
            cell.border = thin_border
            ws.column_dimensions[get_column_letter(col_idx)].width = 20

        # Data
        row_idx = 1
        for row_idx, row in enumerate(report['rows'], 2):
            values = [
                row['flight_date'],
                row['tail_number'],
                f"{row['departure']}-{row['arrival']}",
                row['client_name'] or '',
                row['owner_name'] or '',
                row['management_company_name'] or '',
                float(row['fuel_liters']),
                float(row['mot_amount_paid']),
            ]
            for col_idx, value in enumerate(values, 1):
                cell = ws.cell(row=row_idx, column=col_idx, value=value)
                cell.border = thin_border
            ws.cell(row=row_idx, column=1).number_format = 'yyyy-mm-dd'
            ws.cell(row=row_idx, column=8).number_format = '0.00'

        # Totals
        totals_row = row_idx + 2
        totals = [
            ('Total Flights', report['total_flights'], '0'),
            ('Total Fuel (Liters)', float(report['total_fuel_liters']), 'General'),
            ('Total MOT Refund', float(report['total_mot_paid']), '"$"#,##0.00'),
        ]
        for offset, (label, value, number_format) in enumerate(totals):
            ws.cell(row=totals_row + offset, column=1, value=label).font = Font(bold=True)
            total_cell = ws.cell(row=totals_row + offset, column=2, value=value)
            total_cell.number_format = number_format

        output = io.BytesIO()
        wb.save(output)
        return output.getvalue()
