from chartree.headless import Element
from chartree.size import Size, get_chart_size, get_container_size


class TestContainerSize:
    def test_subtracts_padding(self):
        container = Element(client_width=800, client_height=600, padding=(10, 20, 30, 40))
        assert get_container_size(container) == Size(740, 560)

    def test_no_padding(self):
        container = Element(client_width=300, client_height=200)
        assert get_container_size(container) == Size(300, 200)


class TestChartSize:
    def test_without_auto_fit_uses_configured(self):
        container = Element(client_width=800, client_height=600)
        assert get_chart_size(container, False, 640, 480) == Size(640, 480)

    def test_auto_fit_uses_container(self):
        container = Element(client_width=800, client_height=600)
        assert get_chart_size(container, True, 640, 480) == Size(800, 600)

    def test_auto_fit_keeps_configured_for_zero_dimension(self):
        container = Element(client_width=800, client_height=0)
        assert get_chart_size(container, True, 640, 480) == Size(800, 480)

    def test_auto_fit_unmeasured_container(self):
        assert get_chart_size(Element(), True, 640, 480) == Size(640, 480)
