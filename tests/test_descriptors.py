import unittest

from payment_methods import (
    NATIVE_INSTRUMENT_NAMES,
    NATIVE_METHOD_NAMES,
    ApplePay,
    CodecError,
    CreditCard,
    MissingOrInvalidDiscriminator,
    Operation,
    Swish,
    SwishPrefill,
    WebBased,
    decode_payment_method,
    decode_payment_methods,
    encode_payment_method,
    first_method,
)

CARD_PREFILL = {
    "rank": 1,
    "paymentToken": "token-1",
    "cardBrand": "Visa",
    "maskedPan": "492500******0004",
    "expiryDate": "2025-03-01T00:00:00Z",
}
OPERATION = {"rel": "expand-method", "href": "https://example.com/m", "method": "GET"}


class TestDecodeTagOnly(unittest.TestCase):

    def test_known_tags_decode_with_all_fields_absent(self):
        swish = decode_payment_method({"paymentMethod": "Swish"})
        self.assertEqual(swish, Swish(prefills=None, operations=None))
        self.assertEqual(swish.name, "Swish")

        card = decode_payment_method({"paymentMethod": "CreditCard"})
        self.assertEqual(card, CreditCard(prefills=None, operations=None, card_brands=None))
        self.assertEqual(card.name, "CreditCard")

        apple = decode_payment_method({"paymentMethod": "ApplePay"})
        self.assertEqual(
            apple,
            ApplePay(operations=None, card_brands=None, merchant_capabilities=None),
        )
        self.assertEqual(apple.name, "ApplePay")

    def test_unknown_tag_becomes_web_based(self):
        method = decode_payment_method({"paymentMethod": "AnythingElse", "prefills": []})
        self.assertEqual(method, WebBased(payment_method="AnythingElse"))
        self.assertEqual(method.name, "AnythingElse")
        self.assertIsNone(method.operations)

    def test_tag_match_is_case_sensitive(self):
        method = decode_payment_method({"paymentMethod": "swish"})
        self.assertEqual(method, WebBased(payment_method="swish"))


class TestDiscriminator(unittest.TestCase):

    def test_missing_tag_fails(self):
        with self.assertRaises(MissingOrInvalidDiscriminator):
            decode_payment_method({"prefills": []})

    def test_non_string_tag_fails(self):
        for tag in (None, 3, ["Swish"], {"name": "Swish"}, True):
            with self.subTest(tag=tag):
                with self.assertRaises(MissingOrInvalidDiscriminator):
                    decode_payment_method({"paymentMethod": tag})

    def test_non_object_payload_fails(self):
        for payload in ("Swish", None, ["Swish"]):
            with self.subTest(payload=payload):
                with self.assertRaises(MissingOrInvalidDiscriminator):
                    decode_payment_method(payload)

    def test_discriminator_error_is_a_codec_error(self):
        with self.assertRaises(CodecError) as ctx:
            decode_payment_method({})
        self.assertIn("paymentMethod", str(ctx.exception))
        self.assertEqual(ctx.exception.payload, {})


class TestFieldTolerance(unittest.TestCase):

    def test_full_swish_entry(self):
        method = decode_payment_method(
            {
                "paymentMethod": "Swish",
                "prefills": [{"rank": 2, "msisdn": "+46739000001"}],
                "operations": [OPERATION],
            }
        )
        self.assertEqual(method.prefills, (SwishPrefill(rank=2, msisdn="+46739000001"),))
        self.assertEqual(method.operations, (Operation.from_wire(OPERATION),))

    def test_null_prefills_on_swish(self):
        method = decode_payment_method({"paymentMethod": "Swish", "prefills": None})
        self.assertIsNone(method.prefills)

    def test_null_prefills_on_credit_card(self):
        method = decode_payment_method({"paymentMethod": "CreditCard", "prefills": None})
        self.assertIsNone(method.prefills)

    def test_malformed_prefill_element_on_swish_drops_only_prefills(self):
        method = decode_payment_method(
            {
                "paymentMethod": "Swish",
                "prefills": [{"rank": 1, "msisdn": "+46739000001"}, {"rank": "x"}],
                "operations": [OPERATION],
            }
        )
        self.assertIsNone(method.prefills)
        self.assertEqual(len(method.operations), 1)

    def test_malformed_prefill_element_on_credit_card_drops_only_prefills(self):
        broken = dict(CARD_PREFILL, expiryDate="not a date")
        method = decode_payment_method(
            {
                "paymentMethod": "CreditCard",
                "prefills": [CARD_PREFILL, broken],
                "cardBrands": ["Visa"],
            }
        )
        self.assertIsNone(method.prefills)
        self.assertEqual(method.card_brands, ("Visa",))
        self.assertIsNone(method.operations)

    def test_malformed_card_brand_keeps_other_apple_pay_fields(self):
        method = decode_payment_method(
            {
                "paymentMethod": "ApplePay",
                "cardBrands": ["VISA", {"brand": "MasterCard"}],
                "merchantCapabilities": ["supports3DS"],
                "operations": [OPERATION],
            }
        )
        self.assertIsNone(method.card_brands)
        self.assertEqual(method.merchant_capabilities, ("supports3DS",))
        self.assertEqual(method.operations[0].rel, "expand-method")

    def test_wrong_container_shape_is_absent(self):
        method = decode_payment_method(
            {
                "paymentMethod": "CreditCard",
                "prefills": CARD_PREFILL,
                "operations": "expand-method",
                "cardBrands": "Visa",
            }
        )
        self.assertEqual(method, CreditCard())

    def test_empty_lists_stay_present(self):
        method = decode_payment_method(
            {"paymentMethod": "ApplePay", "cardBrands": [], "merchantCapabilities": []}
        )
        self.assertEqual(method.card_brands, ())
        self.assertEqual(method.merchant_capabilities, ())
        self.assertIsNone(method.operations)

    def test_decoded_descriptors_are_hashable(self):
        payload = {"paymentMethod": "CreditCard", "prefills": [CARD_PREFILL], "cardBrands": ["Visa"]}
        first = decode_payment_method(payload)
        second = decode_payment_method(payload)
        self.assertEqual(first, second)
        self.assertEqual(len({first, second}), 1)


class TestCatalog(unittest.TestCase):

    def test_decode_catalog_keeps_order(self):
        methods = decode_payment_methods(
            [{"paymentMethod": "Invoice"}, {"paymentMethod": "Swish"}]
        )
        self.assertEqual([method.name for method in methods], ["Invoice", "Swish"])

    def test_catalog_propagates_discriminator_errors(self):
        with self.assertRaises(MissingOrInvalidDiscriminator):
            decode_payment_methods([{"paymentMethod": "Swish"}, {"prefills": []}])

    def test_catalog_must_be_a_list(self):
        with self.assertRaises(CodecError):
            decode_payment_methods({"paymentMethod": "Swish"})

    def test_first_method(self):
        card = CreditCard(card_brands=("Visa",))
        swish = Swish()
        invoice = WebBased(payment_method="Invoice")
        methods = [card, swish, invoice]

        self.assertIs(first_method(methods, "Swish"), swish)
        self.assertIs(first_method(methods, "Invoice"), invoice)
        self.assertIsNone(first_method(methods, "ApplePay"))
        self.assertIsNone(first_method([], "Swish"))

    def test_first_method_returns_first_match(self):
        first = WebBased(payment_method="Invoice")
        methods = [Swish(), first, WebBased(payment_method="Invoice")]
        self.assertIs(first_method(iter(methods), "Invoice"), first)

    def test_descriptor_and_instrument_names_stay_aligned(self):
        self.assertEqual(NATIVE_METHOD_NAMES, NATIVE_INSTRUMENT_NAMES)


class TestEncode(unittest.TestCase):

    def test_swish_encoding(self):
        method = Swish(prefills=(SwishPrefill(rank=1, msisdn="+46739000001"),))
        self.assertEqual(
            encode_payment_method(method),
            {"prefills": [{"rank": 1, "msisdn": "+46739000001"}], "operations": None},
        )

    def test_credit_card_encoding_order_and_nulls(self):
        method = decode_payment_method(
            {"paymentMethod": "CreditCard", "prefills": [CARD_PREFILL], "cardBrands": ["Visa"]}
        )
        wire = encode_payment_method(method)
        self.assertEqual(list(wire), ["prefills", "operations", "cardBrands"])
        self.assertEqual(wire["prefills"], [CARD_PREFILL])
        self.assertIsNone(wire["operations"])
        self.assertEqual(wire["cardBrands"], ["Visa"])

    def test_apple_pay_encoding(self):
        method = decode_payment_method(
            {"paymentMethod": "ApplePay", "operations": [OPERATION], "cardBrands": ["Visa"]}
        )
        wire = encode_payment_method(method)
        self.assertEqual(list(wire), ["operations", "cardBrands", "merchantCapabilities"])
        self.assertEqual(wire["operations"], [OPERATION])
        self.assertIsNone(wire["merchantCapabilities"])

    def test_absent_fields_are_written_as_null(self):
        self.assertEqual(
            encode_payment_method(ApplePay()),
            {"operations": None, "cardBrands": None, "merchantCapabilities": None},
        )

    def test_web_based_encodes_bare_string(self):
        self.assertEqual(encode_payment_method(WebBased(payment_method="Invoice")), "Invoice")

    def test_discriminator_is_not_emitted(self):
        for method in (Swish(), CreditCard(), ApplePay()):
            with self.subTest(method=method.name):
                self.assertNotIn("paymentMethod", encode_payment_method(method))

    def test_encoded_native_methods_do_not_decode_again(self):
        for method in (Swish(), CreditCard(card_brands=("Visa",)), ApplePay()):
            with self.subTest(method=method.name):
                with self.assertRaises(MissingOrInvalidDiscriminator):
                    decode_payment_method(encode_payment_method(method))

    def test_encoded_web_based_does_not_decode_again(self):
        with self.assertRaises(MissingOrInvalidDiscriminator):
            decode_payment_method(encode_payment_method(WebBased(payment_method="Invoice")))


if __name__ == '__main__':
    unittest.main()
