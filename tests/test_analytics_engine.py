import math
from datetime import datetime

import pytest

from app.services.analytics.engine import TransactionAnalytics
from app.services.analytics.periods import InvalidMonthError


class TestListTransactions:
    def test_count_ignores_pagination(self, analytics, sample_products):
        for page, per_page in [(1, 1), (2, 2), (5, 10), (1, 100)]:
            result = analytics.list_transactions(month=3, page=page, per_page=per_page)
            assert result["count"] == 5

    def test_pages_rebuild_the_filtered_set(self, analytics, sample_products):
        per_page = 2
        first = analytics.list_transactions(per_page=per_page)
        pages = math.ceil(first["count"] / per_page)

        collected = []
        for page in range(1, pages + 1):
            collected.extend(
                product.id
                for product in analytics.list_transactions(page=page, per_page=per_page)["data"]
            )

        assert collected == [1, 2, 3, 4, 5, 6, 7]

    def test_search_and_month(self, analytics, sample_products):
        result = analytics.list_transactions(month=3, search="jacket")
        assert [product.id for product in result["data"]] == [7]
        assert result["count"] == 1

    def test_default_page_size_is_ten(self, analytics, add_products):
        add_products([
            {"id": n, "title": f"Item {n}", "price": 10.0, "date_of_sale": datetime(2023, 5, 1), "sold": True}
            for n in range(25)
        ])

        result = analytics.list_transactions()
        assert len(result["data"]) == 10
        assert result["count"] == 25

    def test_empty_store(self, analytics):
        assert analytics.list_transactions(month=3) == {"data": [], "count": 0}


class TestStatistics:
    def test_amount_covers_sold_and_unsold(self, analytics, sample_products):
        facets = analytics.get_statistics(month=3)["totalSales"][0]

        (sold,) = facets["itemSold"]
        assert sold["_id"] is None
        assert sold["totalAmount"] == pytest.approx(109.95 + 22.3 + 695.0 + 64.0 + 39.99)
        assert sold["totalItemsSold"] == 3

        (not_sold,) = facets["itemNotSold"]
        assert not_sold["totalItemsNotSold"] == 2
        assert not_sold["totalItemsSold"] == 0

    def test_unsold_only_month(self, analytics, sample_products):
        facets = analytics.get_statistics(month=11)["totalSales"][0]
        assert facets["itemSold"] == [{"_id": None, "totalAmount": 123.0, "totalItemsSold": 0}]
        assert facets["itemNotSold"] == [{"_id": None, "totalItemsNotSold": 1, "totalItemsSold": 0}]

    def test_all_sold_month_has_no_unsold_facet(self, analytics, add_products):
        add_products([
            {"id": 1, "price": 5.0, "date_of_sale": datetime(2023, 6, 1), "sold": True},
        ])
        facets = analytics.get_statistics(month=6)["totalSales"][0]
        assert facets["itemSold"][0]["totalItemsSold"] == 1
        assert facets["itemNotSold"] == []

    def test_empty_month_has_empty_facets(self, analytics, sample_products):
        assert analytics.get_statistics(month=1) == {
            "totalSales": [{"itemSold": [], "itemNotSold": []}]
        }

    def test_without_month_covers_everything(self, analytics, sample_products):
        facets = analytics.get_statistics()["totalSales"][0]
        assert facets["itemSold"][0]["totalItemsSold"] == 3
        assert facets["itemNotSold"][0]["totalItemsNotSold"] == 4


class TestBarChart:
    def test_counts_per_bucket(self, analytics, sample_products):
        result = analytics.bar_chart("March")
        assert [entry["count"] for entry in result] == [2, 1, 0, 0, 0, 0, 1, 0, 0, 0]
        assert result[0]["range"] == "0-100"
        assert result[-1]["range"] == "901-above"

    def test_buckets_sum_to_month_total(self, analytics, sample_products):
        for name in ["March", "April", "November"]:
            total = sum(entry["count"] for entry in analytics.bar_chart(name))
            start, end = {
                "March": (datetime(2023, 3, 1), datetime(2023, 4, 1)),
                "April": (datetime(2023, 4, 1), datetime(2023, 5, 1)),
                "November": (datetime(2023, 11, 1), datetime(2023, 12, 1)),
            }[name]
            expected = sum(1 for p in sample_products if start <= p.date_of_sale < end)
            assert total == expected

    def test_three_march_sales(self, db_session, add_products):
        add_products([
            {"id": 1, "price": 50.0, "date_of_sale": datetime(2023, 3, 2), "sold": True},
            {"id": 2, "price": 150.0, "date_of_sale": datetime(2023, 3, 10), "sold": False},
            {"id": 3, "price": 999.0, "date_of_sale": datetime(2023, 3, 31, 23, 59), "sold": False},
        ])

        result = TransactionAnalytics(db_session, sales_year=2023).bar_chart("March")
        assert [entry["count"] for entry in result] == [1, 1, 0, 0, 0, 0, 0, 0, 0, 1]

    def test_other_years_are_excluded(self, analytics, sample_products):
        # The 2022 March sale is not counted
        assert sum(entry["count"] for entry in analytics.bar_chart("March")) == 4

    def test_configurable_year(self, db_session, sample_products):
        result = TransactionAnalytics(db_session, sales_year=2022).bar_chart("March")
        assert [entry["count"] for entry in result] == [1, 0, 0, 0, 0, 0, 0, 0, 0, 0]

    def test_unknown_month(self, analytics):
        with pytest.raises(InvalidMonthError):
            analytics.bar_chart("Smarch")


class TestPieChart:
    def test_counts_per_category(self, analytics, sample_products):
        result = analytics.pie_chart("March")
        counts = {entry["_id"]: entry["count"] for entry in result}
        assert counts == {"men's clothing": 2, "jewelery": 1, "women's clothing": 1}

    def test_empty_month(self, analytics, sample_products):
        assert analytics.pie_chart("January") == []


class TestCombined:
    def test_merges_all_four_queries(self, analytics, sample_products):
        result = analytics.combined("March")

        assert set(result) == {"transactions", "statistics", "barChart", "pieChart"}
        assert result["transactions"]["success"] is True
        assert result["transactions"]["count"] == 5
        assert result["statistics"] == analytics.get_statistics(month=3)
        assert result["barChart"] == analytics.bar_chart("March")
        assert result["pieChart"] == analytics.pie_chart("March")

    def test_month_number_and_name_agree(self, analytics, sample_products):
        by_number = analytics.combined(3)
        by_name = analytics.combined("March")
        assert by_number["statistics"] == by_name["statistics"]
        assert by_number["barChart"] == by_name["barChart"]
        assert by_number["transactions"]["count"] == by_name["transactions"]["count"]
