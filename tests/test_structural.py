"""
Tests for structural patterns.

Tests cover:
- Adapter delegation
- Bridge implementor swapping
- Composite traversal order and deep trees
- Decorator cost accumulation
- Facade call order
- Virtual and protection proxies
- Flyweight pool sharing, including concurrent first access
"""

import itertools
import threading

import pytest

from gof_catalog.errors import InvalidArgumentError
from gof_catalog.harness import OutputSink
from gof_catalog.structural.adapter import Auto, Camel, CamelToTransportAdapter, Traveller
from gof_catalog.structural.bridge import (
    CorporateProgrammer,
    CppLanguage,
    FreelanceProgrammer,
    SwiftLanguage,
)
from gof_catalog.structural.composite import Directory, File
from gof_catalog.structural.decorator import (
    BulgarianPizza,
    CheesePizza,
    ItalianPizza,
    TomatoPizza,
)
from gof_catalog.structural.facade import Compiler, Developer, IdeFacade, Runtime, TextEditor
from gof_catalog.structural.flyweight import BrickHouse, House, HouseFactory, PanelHouse
from gof_catalog.structural.proxy import (
    BookStore,
    LazyBookStore,
    ProtectedBookStore,
)


class TestAdapter:
    """Tests for the camel adapter."""

    def test_traveller_uses_both(self, sink: OutputSink) -> None:
        """The traveller drives a car and, through the adapter, a camel."""
        traveller = Traveller()
        traveller.travel(Auto(sink))
        traveller.travel(CamelToTransportAdapter(Camel(sink)))
        assert sink.lines == [
            "The car is driving on the road",
            "The camel is walking on the sand",
        ]

    def test_adapter_wraps_the_given_camel(self, sink: OutputSink) -> None:
        """The adapter holds the adaptee, not a copy of it."""
        camel = Camel(sink)
        assert CamelToTransportAdapter(camel).camel is camel


class TestBridge:
    """Tests for programmers and languages."""

    def test_swap_implementor(self, sink: OutputSink) -> None:
        """Changing the language changes the work, not the programmer."""
        programmer = FreelanceProgrammer(CppLanguage(), sink)
        programmer.do_work()
        programmer.language = SwiftLanguage()
        programmer.do_work()
        assert sink.lines == [
            "Compiling the program to binary code with a C++ compiler",
            "Running the program's executable",
            "Compiling the source code with Apple LLVM",
            "Running the .ipa file",
        ]

    def test_refined_abstractions(self, sink: OutputSink) -> None:
        """Each abstraction earns money its own way."""
        FreelanceProgrammer(CppLanguage(), sink).earn_money()
        CorporateProgrammer(CppLanguage(), sink).earn_money()
        assert sink.lines == [
            "Getting paid for the completed order",
            "Getting the salary at the end of the month",
        ]


class TestComposite:
    """Tests for files and directories."""

    def test_display_in_insertion_order(self, sink: OutputSink) -> None:
        """Children are shown in the order they were added, indented by depth."""
        root = Directory("root")
        sub = Directory("sub").add(File("b.txt"))
        root.add(File("a.txt")).add(sub).add(File("c.txt"))
        root.display(sink)
        assert sink.lines == ["root", "  a.txt", "  sub", "    b.txt", "  c.txt"]

    def test_leaf_operation(self, sink: OutputSink) -> None:
        """A leaf displays only itself."""
        File("solo.txt").display(sink)
        assert sink.lines == ["solo.txt"]
        assert File("solo.txt").count_files() == 1

    def test_remove_child(self) -> None:
        """Removed children are no longer counted."""
        root = Directory("root")
        doomed = File("x")
        root.add(doomed).add(File("y"))
        root.remove(doomed)
        assert root.count_files() == 1

    def test_deep_tree(self) -> None:
        """Trees deeper than the recursion limit can be walked."""
        root = Directory("d0")
        node = root
        for depth in range(1, 5000):
            child = Directory(f"d{depth}")
            node.add(child)
            node = child
        node.add(File("leaf"))
        assert root.count_files() == 1
        assert sum(1 for _ in root.walk()) == 5001


class TestDecorator:
    """Tests for pizza toppings."""

    def test_cost_is_base_plus_increments(self) -> None:
        """Italian (10) with tomato (+3) and cheese (+5) costs 18."""
        assert CheesePizza(TomatoPizza(ItalianPizza())).cost() == 18

    def test_wrap_order_does_not_change_cost(self) -> None:
        """Every order of additive toppings gives the same cost."""
        toppings = [TomatoPizza, CheesePizza, TomatoPizza]
        costs = set()
        for order in itertools.permutations(toppings):
            pizza = BulgarianPizza()
            for topping in order:
                pizza = topping(pizza)
            costs.add(pizza.cost())
        assert costs == {8 + 3 + 5 + 3}

    def test_name_follows_application_order(self) -> None:
        """Names record the toppings in the order applied."""
        pizza = CheesePizza(TomatoPizza(ItalianPizza()))
        assert pizza.name == "Italian pizza, with tomatoes, with cheese"


class TestFacade:
    """Tests for the IDE facade."""

    def test_fixed_call_order(self, sink: OutputSink) -> None:
        """Start and stop drive the subsystems in a fixed order."""
        ide = IdeFacade(TextEditor(sink), Compiler(sink), Runtime(sink))
        Developer().create_application(ide)
        assert sink.lines == [
            "Writing code",
            "Saving code",
            "Compiling the application",
            "Running the application",
            "Shutting down the application",
        ]


class TestProxy:
    """Tests for the book store proxies."""

    def test_virtual_proxy_is_lazy(self, sink: OutputSink) -> None:
        """The real store is built on the first page request only."""
        lazy = LazyBookStore(["one", "two"], sink)
        assert not lazy.is_loaded
        assert sink.lines == []

        assert lazy.get_page(2).text == "two"
        assert lazy.is_loaded
        lazy.get_page(1)
        assert sink.lines == ["Loading 2 pages from storage"]

    def test_missing_page(self, sink: OutputSink) -> None:
        """Out-of-range pages are None."""
        store = BookStore(["one"], sink)
        assert store.get_page(0) is None
        assert store.get_page(2) is None

    def test_access_denied_until_authorized(self, sink: OutputSink) -> None:
        """Requests are denied, not raised, until authorization succeeds."""
        guarded = ProtectedBookStore(BookStore(["one"], sink), token="key")

        denied = guarded.get_page(1)
        assert not denied.granted
        assert denied.page is None

        assert not guarded.authorize("nope")
        assert not guarded.get_page(1).granted

        assert guarded.authorize("key")
        granted = guarded.get_page(1)
        assert granted.granted
        assert granted.page.text == "one"

    def test_non_ascii_token_is_denied(self, sink: OutputSink) -> None:
        """A wrong non-ASCII token is a plain denial."""
        guarded = ProtectedBookStore(BookStore(["one"], sink), token="s3cret")
        assert guarded.authorize("пароль") is False
        assert not guarded.get_page(1).granted

    def test_non_ascii_token_is_accepted(self, sink: OutputSink) -> None:
        """A matching non-ASCII token authorizes."""
        guarded = ProtectedBookStore(BookStore(["one"], sink), token="пароль")
        assert guarded.authorize("пароль") is True
        assert guarded.get_page(1).granted

    def test_authorized_missing_page(self, sink: OutputSink) -> None:
        """An authorized request for a missing page is granted with no page."""
        guarded = ProtectedBookStore(BookStore(["one"], sink), token="key")
        guarded.authorize("key")
        result = guarded.get_page(5)
        assert result.granted
        assert result.page is None
        assert result.reason == "no page 5"


class TestFlyweight:
    """Tests for the house factory."""

    def test_base_house_is_abstract(self) -> None:
        """Only concrete house types can be instantiated."""
        with pytest.raises(TypeError):
            House()  # type: ignore[abstract]

    def test_same_key_same_instance(self) -> None:
        """Two requests for Panel return the same shared house."""
        factory = HouseFactory()
        assert factory.get("Panel") is factory.get("Panel")
        assert isinstance(factory.get("Panel"), PanelHouse)

    def test_pool_size_counts_distinct_keys(self) -> None:
        """N requests over K keys leave K houses in the pool."""
        factory = HouseFactory()
        for key in ["Panel", "Brick", "Panel", "Panel", "Brick"]:
            factory.get(key)
        assert factory.pool_size == 2
        assert factory.created == 2
        assert isinstance(factory.get("Brick"), BrickHouse)

    def test_unknown_key(self) -> None:
        """An unknown house type is a contract violation."""
        with pytest.raises(InvalidArgumentError, match="Wooden"):
            HouseFactory().get("Wooden")

    def test_extrinsic_state(self, sink: OutputSink) -> None:
        """Location is passed in per build, not stored."""
        house = HouseFactory().get("Brick")
        house.build(1.0, 2.0, sink)
        house.build(3.0, 4.0, sink)
        assert sink.lines == [
            "Built a brick house with 5 stories; coordinates: 2.0 latitude and 1.0 longitude",
            "Built a brick house with 5 stories; coordinates: 4.0 latitude and 3.0 longitude",
        ]

    def test_concurrent_first_access(self) -> None:
        """Concurrent first requests create a single instance."""
        factory = HouseFactory()
        barrier = threading.Barrier(16)
        results = []

        def worker() -> None:
            barrier.wait()
            results.append(factory.get("Panel"))

        threads = [threading.Thread(target=worker) for _ in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert factory.created == 1
        assert all(r is results[0] for r in results)
