from rest_framework import serializers

from .conf import get_max_length, get_default_variables
from .dsl import FormulaError, UnboundVariableError, Formatter
from .utils import parse_formula, evaluate_tree


class FormulaSerializer(serializers.Serializer):
    """Validates a formula, then exposes its canonical form and value."""
    expression = serializers.CharField()
    variables = serializers.DictField(child=serializers.FloatField(), required=False, default=dict)
    canonical = serializers.CharField(read_only=True)
    result = serializers.FloatField(read_only=True)

    def validate_expression(self, value):
        """Reject formulas that are too long or do not parse."""
        max_length = get_max_length()
        if len(value) > max_length:
            raise serializers.ValidationError(
                f"Ensure this formula has no more than {max_length} characters."
            )
        try:
            # reused by validate()
            self._tree = parse_formula(value)
        except FormulaError as e:
            raise serializers.ValidationError(str(e))
        return value

    def validate(self, attrs):
        """Evaluate the formula against default and supplied variables."""
        tree = self._tree
        variables = get_default_variables()
        variables.update(attrs.get("variables", {}))

        try:
            result = evaluate_tree(tree, variables)
            canonical = Formatter().format(tree)
        except UnboundVariableError as e:
            raise serializers.ValidationError({"variables": [str(e)]})
        except FormulaError as e:
            raise serializers.ValidationError({"expression": [str(e)]})

        attrs["canonical"] = canonical
        attrs["result"] = result
        return attrs
