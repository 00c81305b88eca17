"""
PDF Itinerary Generator
Renders planner output (list of DayPlan) as a printable itinerary
"""

from io import BytesIO
from typing import List, Optional, Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch, cm
from reportlab.lib.enums import TA_CENTER
from reportlab.platypus import (
    SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
)
from xml.sax.saxutils import escape

from johar.models.schemas import DayPlan


class PDFItineraryGenerator:
    """Generate PDF itineraries"""

    COLOR_PRIMARY = colors.HexColor('#166534')
    COLOR_SECONDARY = colors.HexColor('#16A34A')
    COLOR_TEXT = colors.HexColor('#1F2937')
    COLOR_GRAY = colors.HexColor('#6B7280')
    COLOR_LIGHT_GRAY = colors.HexColor('#F3F4F6')

    def __init__(self):
        self.styles = getSampleStyleSheet()
        self._create_custom_styles()

    def _create_custom_styles(self):
        """Create custom paragraph styles"""

        self.styles.add(ParagraphStyle(
            name='CustomTitle',
            parent=self.styles['Title'],
            fontSize=24,
            textColor=self.COLOR_PRIMARY,
            spaceAfter=12,
            alignment=TA_CENTER,
            fontName='Helvetica-Bold'
        ))

        self.styles.add(ParagraphStyle(
            name='CustomSubtitle',
            parent=self.styles['Normal'],
            fontSize=13,
            textColor=self.COLOR_SECONDARY,
            spaceAfter=20,
            alignment=TA_CENTER,
            fontName='Helvetica'
        ))

        self.styles.add(ParagraphStyle(
            name='DayHeader',
            parent=self.styles['Heading2'],
            fontSize=14,
            textColor=self.COLOR_SECONDARY,
            spaceAfter=8,
            spaceBefore=14,
            fontName='Helvetica-Bold'
        ))

        self.styles.add(ParagraphStyle(
            name='CellText',
            parent=self.styles['Normal'],
            fontSize=10,
            textColor=self.COLOR_TEXT,
            leading=13,
            fontName='Helvetica'
        ))

    def render(self, itinerary: Sequence[DayPlan], interests: Optional[List[str]] = None) -> bytes:
        """Render the itinerary and return the PDF bytes"""

        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=2*cm,
            leftMargin=2*cm,
            topMargin=2.5*cm,
            bottomMargin=2*cm,
            title="Jharkhand Itinerary",
        )

        story = []
        story.extend(self._create_cover(itinerary, interests or []))
        for day_plan in itinerary:
            story.extend(self._create_day(day_plan))

        doc.build(story, onFirstPage=self._add_page_decorations,
                  onLaterPages=self._add_page_decorations)

        return buffer.getvalue()

    def _create_cover(self, itinerary, interests):
        elements = []
        elements.append(Paragraph("JHARKHAND ITINERARY", self.styles['CustomTitle']))

        summary = f"{len(itinerary)} day(s)"
        if interests:
            summary += " • " + ", ".join(escape(i) for i in interests)
        elements.append(Paragraph(summary, self.styles['CustomSubtitle']))
        elements.append(Spacer(1, 0.2*inch))
        return elements

    def _create_day(self, day_plan: DayPlan):
        elements = [Paragraph(f"DAY {day_plan.day}", self.styles['DayHeader'])]

        rows = [["Time", "Activity", "Tip"]]
        for activity in day_plan.activities:
            rows.append([
                activity.time,
                Paragraph(escape(activity.activity), self.styles['CellText']),
                Paragraph(escape(activity.tip), self.styles['CellText']),
            ])

        table = Table(rows, colWidths=[0.9*inch, 2.6*inch, 3.0*inch])
        table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), self.COLOR_LIGHT_GRAY),
            ('TEXTCOLOR', (0, 0), (-1, -1), self.COLOR_TEXT),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, -1), 10),
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 6),
            ('TOPPADDING', (0, 0), (-1, -1), 6),
            ('GRID', (0, 0), (-1, -1), 0.5, self.COLOR_GRAY),
        ]))
        elements.append(table)
        elements.append(Spacer(1, 0.15*inch))
        return elements

    def _add_page_decorations(self, canvas, doc):
        """Add header line and page footer"""
        canvas.saveState()

        canvas.setStrokeColor(self.COLOR_PRIMARY)
        canvas.setLineWidth(2)
        canvas.line(2*cm, A4[1] - 2*cm, A4[0] - 2*cm, A4[1] - 2*cm)

        canvas.setFont('Helvetica', 8)
        canvas.setFillColor(self.COLOR_GRAY)
        canvas.drawString(2*cm, 1.5*cm, f"Johar Jharkhand • Page {doc.page}")

        canvas.restoreState()


def generate_itinerary_pdf(itinerary: Sequence[DayPlan], interests: Optional[List[str]] = None) -> bytes:
    """Convenience function to render a PDF"""
    return PDFItineraryGenerator().render(itinerary, interests)
