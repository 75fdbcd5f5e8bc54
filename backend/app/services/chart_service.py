from app.schemas.chart import ChartData


def format_chart_data(rows: list[dict], label_key: str, series: dict[str, str]) -> ChartData:
    """Build a Chart.js payload from report rows.

    Args:
        rows: report rows, one per x-axis point
        label_key: row key holding the x-axis label
        series: row key -> dataset legend, one dataset per entry

    Missing or null amounts are plotted as 0; amounts are rounded to cents.
    """
    labels = [str(row[label_key]) for row in rows]
    datasets = [
        {
            "label": legend,
            "data": [round(float(row.get(key) or 0), 2) for row in rows],
        }
        for key, legend in series.items()
    ]
    return ChartData(labels=labels, datasets=datasets)
