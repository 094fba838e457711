from modelgraph.resolve import resolve_target


IMPORTS = {
	"Comment": r"App\Models\Comment",
	"Invoice": r"Accounting\Invoice",
}


def test_imported_reference():
	assert resolve_target("Comment", r"App\Models", IMPORTS) == r"App\Models\Comment"


def test_same_namespace_fallback():
	assert resolve_target("Tag", r"App\Models", IMPORTS) == r"App\Models\Tag"
	assert resolve_target("Tag", r"App\Models", {}) == r"App\Models\Tag"


def test_rooted_reference_ignores_imports_and_namespace():
	assert resolve_target(r"\Billing\Invoice", r"App\Models", IMPORTS) == r"Billing\Invoice"
	assert resolve_target(r"\Billing\Invoice", "Other", {}) == r"Billing\Invoice"


def test_partially_qualified_reference_uses_last_segment():
	assert resolve_target(r"Models\Comment", r"App", IMPORTS) == r"App\Models\Comment"
	assert resolve_target(r"Sub\Tag", r"App\Models", {}) == r"App\Models\Tag"


def test_resolution_is_repeatable():
	first = resolve_target("Invoice", r"App\Models", IMPORTS)
	second = resolve_target("Invoice", r"App\Models", IMPORTS)
	assert first == second == r"Accounting\Invoice"
