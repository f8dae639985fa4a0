"""Tests for the decoders module."""

from gen_api_models.decoders import compose_response_decoders, decoder_for_response
from gen_api_models.models import ResponseEntry

_GENERIC_200 = 'r.ioResponseDecoder<200, (typeof type)["_A"], (typeof type)["_O"]>(200, type)'
_ERROR_404 = "r.basicErrorResponseDecoder<404>(404)"
_PROBLEM_500 = 'r.ioResponseDecoder<500, (typeof ProblemJson)["_A"], (typeof ProblemJson)["_O"]>(500, ProblemJson)'


class TestDecoderForResponse:
    def test_no_content(self):
        assert decoder_for_response("204", "undefined") == (
            "r.constantResponseDecoder<undefined, 204>(204, undefined)"
        )

    def test_generic_error(self):
        assert decoder_for_response("404", "Error") == _ERROR_404

    def test_model(self):
        assert decoder_for_response("500", "ProblemJson") == _PROBLEM_500

    def test_configured_markers(self):
        assert decoder_for_response("204", "void", no_content_type="void").startswith(
            "r.constantResponseDecoder"
        )
        assert decoder_for_response("400", "Problem", error_type="Problem") == (
            "r.basicErrorResponseDecoder<400>(400)"
        )


class TestComposeResponseDecoders:
    """Test folding of per-status decoders."""

    def test_single_status(self):
        success = ResponseEntry(status="200", type="Profile")
        decoders = compose_response_decoders([success], success)
        assert decoders.expression == _GENERIC_200
        assert decoders.default_type == "Profile"

    def test_success_uses_generic_type(self):
        responses = [
            ResponseEntry(status="200", type="Profile"),
            ResponseEntry(status="404", type="Error"),
        ]
        decoders = compose_response_decoders(responses, responses[0])
        assert decoders.expression == f"r.composeResponseDecoders({_GENERIC_200}, {_ERROR_404})"
        assert "typeof Profile" not in decoders.expression

    def test_left_fold_in_declaration_order(self):
        two = [
            ResponseEntry(status="200", type="Profile"),
            ResponseEntry(status="404", type="Error"),
        ]
        three = [*two, ResponseEntry(status="500", type="ProblemJson")]

        short = compose_response_decoders(two, two[0]).expression
        long = compose_response_decoders(three, three[0]).expression

        assert long == f"r.composeResponseDecoders({short}, {_PROBLEM_500})"

    def test_success_not_first(self):
        responses = [
            ResponseEntry(status="404", type="Error"),
            ResponseEntry(status="201", type="Pet"),
        ]
        decoders = compose_response_decoders(responses, responses[1])
        assert decoders.expression.startswith(f"r.composeResponseDecoders({_ERROR_404}, ")
        assert decoders.expression.endswith("(201, type))")
        assert decoders.default_type == "Pet"

    def test_no_content_default_type(self):
        success = ResponseEntry(status="200", type="undefined")
        decoders = compose_response_decoders([success], success)
        assert decoders.default_type == "t.undefined"
