from app.services.chart_service import format_chart_data


class TestFormatChartData:
    """Tests for Chart.js formatting."""

    def test_empty_rows_keep_series(self):
        chart = format_chart_data([], label_key="day", series={"total": "Sales"})
        assert chart.labels == []
        assert chart.datasets == [{"label": "Sales", "data": []}]

    def test_labels_and_series(self):
        rows = [
            {"day": "2025-01-01", "total": 10.457, "orders": 2},
            {"day": "2025-01-02", "total": None, "orders": 1},
        ]
        chart = format_chart_data(rows, label_key="day", series={"total": "Revenue", "orders": "Orders"})

        assert chart.labels == ["2025-01-01", "2025-01-02"]
        assert chart.datasets[0] == {"label": "Revenue", "data": [10.46, 0]}
        assert chart.datasets[1] == {"label": "Orders", "data": [2.0, 1.0]}

    def test_missing_key_plots_zero(self):
        chart = format_chart_data([{"day": "Mon"}], label_key="day", series={"total": "Sales"})
        assert chart.datasets[0]["data"] == [0]
