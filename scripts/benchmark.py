#!/usr/bin/env python3
"""Time ``yahtml.convert`` on synthetic documents.

Each case builds a tree once and converts it repeatedly, reporting the total
time, the average per conversion and conversions per second. ``--stress``
additionally renders nested structures of growing depth.
"""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List

REPO_ROOT = Path(__file__).resolve().parents[1]
REPO_ROOT_STR = str(REPO_ROOT)
if REPO_ROOT_STR not in sys.path:
    sys.path.insert(0, REPO_ROOT_STR)

from yahtml import convert


@dataclass
class BenchResult:
    name: str
    iterations: int
    total_ms: float

    @property
    def average_ms(self) -> float:
        return self.total_ms / self.iterations

    @property
    def ops_per_sec(self) -> float:
        return 1000 / self.average_ms if self.average_ms else float("inf")


def benchmark(name: str, fn: Callable[[], Any], iterations: int) -> BenchResult:
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    total_ms = (time.perf_counter() - start) * 1000
    return BenchResult(name=name, iterations=iterations, total_ms=total_ms)


def simple_elements(count: int) -> List[Any]:
    return [f'p: "Paragraph {i}"' for i in range(count)]


def nested_structure(depth: int, breadth: int = 2) -> Any:
    if depth == 0:
        return 'span: "Leaf content"'
    return {"div": [nested_structure(depth - 1, breadth) for _ in range(breadth)]}


def deep_chain(depth: int) -> List[Any]:
    """A single path of ``depth`` nested divs."""

    node: Any = 'span: "Leaf content"'
    for _ in range(depth):
        node = {"div": [node]}
    return [node]


def _form_group(name: str, label: str, input_type: str) -> dict:
    return {
        "div.form-group": [
            f'label for={name}: "{label}"',
            f"input type={input_type} id={name} name={name} required:",
        ]
    }


def complex_form() -> List[Any]:
    return [
        {
            'form action="/submit" method="post"': [
                'h2: "User Registration"',
                _form_group("name", "Full Name", "text"),
                _form_group("email", "Email", "email"),
                _form_group("password", "Password", "password"),
                {
                    "div.form-group": [
                        'label for=country: "Country"',
                        {
                            "select id=country name=country": [
                                'option value=us: "United States"',
                                'option value=uk: "United Kingdom"',
                                'option value=ca: "Canada"',
                                'option value=au: "Australia"',
                            ]
                        },
                    ]
                },
                'button type=submit: "Register"',
            ]
        }
    ]


def large_table(rows: int, cols: int) -> List[Any]:
    head = [{"tr": [f'th: "Column {j}"' for j in range(cols)]}]
    body = [{"tr": [f'td: "Cell {i}-{j}"' for j in range(cols)]} for i in range(rows)]
    return [{"table": [{"thead": head}, {"tbody": body}]}]


def real_world_page() -> List[Any]:
    nav = [{"li": [f'a href="/{slug}": "{label}"']} for slug, label in (
        ("features", "Features"),
        ("docs", "Documentation"),
        ("pricing", "Pricing"),
        ("contact", "Contact"),
    )]
    cards = [
        {"div.feature-card": [f'h3: "{title}"', f'p: "{text}"']}
        for title, text in (
            ("Simple Syntax", "Write HTML using clean YAML syntax"),
            ("No Closing Tags", "Forget about closing tags and focus on content"),
            ("Valid YAML", "Every YAHTML document is valid YAML"),
        )
    ]
    return [
        {
            "div#app.container": [
                {"header.site-header": [{"nav.navbar": ['a href="/" class="logo": "YAHTML"', {"ul.nav-menu": nav}]}]},
                {
                    "main.content": [
                        {
                            "section.hero": [
                                'h1.hero-title: "Build HTML with YAML Simplicity"',
                                'p.hero-subtitle: "Write cleaner, more maintainable markup"',
                                {"div.cta-buttons": [
                                    'button.btn.btn-primary: "Get Started"',
                                    'button.btn.btn-secondary: "Learn More"',
                                ]},
                            ]
                        },
                        {"section.features": ['h2: "Features"', {"div.feature-grid": cards}]},
                    ]
                },
                {
                    "footer.site-footer": [
                        'p: "(c) 2024 YAHTML. All rights reserved."',
                        {"div.social-links": [
                            'a href="https://github.com": "GitHub"',
                            'a href="https://twitter.com": "Twitter"',
                        ]},
                    ]
                },
            ]
        }
    ]


def attribute_heavy() -> List[Any]:
    return [
        'div#main.container.fluid class="extra classes here" style="margin: 10px; padding: 20px;" '
        'data-id="123" data-category="test": "Content"',
        'img src="https://example.com/image.jpg" alt="Test Image" width="800" height="600" class="responsive":',
    ]


def escaping_content() -> List[Any]:
    return [
        'p: "This & that < more > stuff"',
        'div: "She said \\"Hello\\" & goodbye"',
        'span: "<script>alert(1)</script>"',
    ]


def edge_cases() -> List[Any]:
    return [
        {"div": None},
        {"span": ""},
        {"p": 42},
        {"em": True},
        None,
        "just text",
        {"style": "body { font-family: sans-serif; }"},
    ]


def _cases(scale: float) -> List[tuple[str, List[Any], int]]:
    def n(iterations: int) -> int:
        return max(1, int(iterations * scale))

    return [
        ("10 simple paragraphs", simple_elements(10), n(10000)),
        ("100 simple paragraphs", simple_elements(100), n(1000)),
        ("3-level nested structure", [nested_structure(3, 3)], n(5000)),
        ("7-level nested structure", [nested_structure(7, 2)], n(1000)),
        ("Complex form", complex_form(), n(5000)),
        ("50x10 table", large_table(50, 10), n(100)),
        ("Real-world page", real_world_page(), n(2000)),
        ("Attribute-heavy elements", attribute_heavy(), n(10000)),
        ("HTML escaping", escaping_content(), n(10000)),
        ("Edge cases", edge_cases(), n(10000)),
    ]


def _print_result(result: BenchResult) -> None:
    print(f"{result.name}:")
    print(f"  Total: {result.total_ms:.2f}ms for {result.iterations} iterations")
    print(f"  Average: {result.average_ms:.4f}ms per conversion")
    print(f"  Ops/sec: {result.ops_per_sec:.0f}")
    print("")


def run_stress(max_depth: int, step: int) -> None:
    print("STRESS TEST: nested depth")
    print("-" * 42)
    depth = step
    while depth <= max_depth:
        document = deep_chain(depth)
        start = time.perf_counter()
        convert(document)
        elapsed_ms = (time.perf_counter() - start) * 1000
        print(f"Depth {depth}: {elapsed_ms:.2f}ms")
        depth += step


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark YAHTML to HTML conversion.")
    parser.add_argument(
        "--scale",
        type=float,
        default=1.0,
        help="Multiply every iteration count (e.g., 0.1 for a quick run).",
    )
    parser.add_argument("--stress", action="store_true", help="Also run the depth stress test.")
    parser.add_argument("--max-depth", type=int, default=10000, help="Deepest nesting for --stress.")
    parser.add_argument("--step", type=int, default=1000, help="Depth increment for --stress.")
    args = parser.parse_args(argv)

    print("YAHTML to HTML Converter Performance Tests")
    print("=" * 42)
    for name, document, iterations in _cases(args.scale):
        _print_result(benchmark(name, lambda document=document: convert(document), iterations))

    if args.stress:
        run_stress(args.max_depth, args.step)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
