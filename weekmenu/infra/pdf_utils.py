import io
from typing import List
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from weekmenu.domain.Menu import WeeklyMenu
from weekmenu.domain.Recipe import Recipe
from weekmenu.domain.ShoppingItem import ShoppingItem

_HEADER_STYLE = [
    ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
    ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
    ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
    ("BOTTOMPADDING", (0,0), (-1,0), 8),
    ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
]


def generate_pdf_for_menu(menu: WeeklyMenu, recipes: List[Recipe], items: List[ShoppingItem]):
    """Generate a PDF with the week's dishes followed by its shopping list."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20)
    names = {r.id: r.name for r in recipes}

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Weekly Menu - {menu.week_start}", styles["Title"]),
        Paragraph(f"{menu.rules.servings} servings", styles["Normal"]),
        Spacer(1, 12),
    ]

    days = [["Date", "Dish", "Locked"]]
    for day in menu.days:
        dish = names.get(day.recipe_id, "Unassigned") if day.recipe_id else "Unassigned"
        days.append([day.date, dish, "yes" if day.locked else ""])
    days_table = Table(days, repeatRows=1)
    days_table.setStyle(TableStyle(_HEADER_STYLE))
    elements += [days_table, Spacer(1, 18), Paragraph("Shopping List", styles["Heading2"])]

    rows = [["Category", "Item", "Quantity", "Cost"]]
    for item in items:
        rows.append([item.category, item.name, f"{item.quantity:g} {item.unit}", f"{item.cost:.2f}"])
    rows.append(["", "Total", "", f"{sum(i.cost for i in items):.2f}"])
    list_table = Table(rows, repeatRows=1)
    list_table.setStyle(TableStyle(_HEADER_STYLE + [("FONTNAME", (0,-1), (-1,-1), "Helvetica-Bold")]))
    elements.append(list_table)

    doc.build(elements)
    return buf.getvalue()
