import io
import itertools
import unittest

from tbls import (
    ID,
    Aggregator,
    Dealer,
    DuplicateIdentity,
    InvalidInput,
    PublicKey,
    Scalar,
    SecretKey,
    Signature,
    StreamRandomSource,
    get_master_public_key,
)
from tbls.constants import RANDOM_SCALAR_SIZE


class Tests(unittest.TestCase):
    def setUp(self):
        # 3-of-5 with fixed coefficients a_0, a_1, a_2
        self.message = b"hello"
        self.msk = (
            SecretKey(Scalar(0x0123456789ABCDEF)),
            SecretKey(Scalar(0xFEDCBA9876543210)),
            SecretKey(Scalar(0x0F1E2D3C4B5A6978)),
        )
        self.mpk = get_master_public_key(self.msk)
        self.ids = [ID.from_index(i) for i in range(1, 6)]
        self.shares = [SecretKey.evaluate(self.msk, id_) for id_ in self.ids]
        self.partials = [share.sign(self.message) for share in self.shares]

    def test_three_of_five(self):
        expected = self.msk[0].sign(self.message)
        for subset in itertools.combinations(range(5), 3):
            recovered = Signature.recover(
                [self.partials[i] for i in subset], [self.ids[i] for i in subset]
            )
            self.assertEqual(recovered.serialize(), expected.serialize())
        self.assertTrue(expected.verify(self.mpk[0], self.message))

    def test_recover_order_independent(self):
        a = Signature.recover(self.partials[:3], self.ids[:3])
        b = Signature.recover(self.partials[2::-1], self.ids[2::-1])
        self.assertEqual(a, b)

    def test_recover_with_more_than_threshold(self):
        self.assertEqual(
            Signature.recover(self.partials, self.ids), self.msk[0].sign(self.message)
        )

    def test_recover_with_too_few(self):
        self.assertNotEqual(
            Signature.recover(self.partials[:2], self.ids[:2]),
            self.msk[0].sign(self.message),
        )

    def test_recover_duplicate_identity(self):
        with self.assertRaises(DuplicateIdentity):
            Signature.recover(
                [self.partials[0], self.partials[1], self.partials[0]],
                [self.ids[0], self.ids[1], self.ids[0]],
            )
        with self.assertRaises(DuplicateIdentity):
            PublicKey.recover(
                [self.shares[0].get_public_key()] * 2, [self.ids[0]] * 2
            )
        with self.assertRaises(DuplicateIdentity):
            SecretKey.recover([self.shares[3]] * 3, [self.ids[3]] * 3)

    def test_recover_singleton(self):
        self.assertEqual(
            Signature.recover([self.partials[4]], [self.ids[4]]), self.partials[4]
        )

    def test_recover_invalid_input(self):
        with self.assertRaises(InvalidInput):
            Signature.recover([], [])
        with self.assertRaises(InvalidInput):
            Signature.recover(self.partials[:3], self.ids[:2])
        with self.assertRaises(InvalidInput):
            Signature.recover(self.partials[:2], [1, 2])

    def test_recover_secret_key(self):
        for subset in itertools.combinations(range(5), 3):
            self.assertEqual(
                SecretKey.recover(
                    [self.shares[i] for i in subset], [self.ids[i] for i in subset]
                ),
                self.msk[0],
            )

    def test_recover_public_key(self):
        public_shares = [PublicKey.evaluate(self.mpk, id_) for id_ in self.ids[2:]]
        self.assertEqual(PublicKey.recover(public_shares, self.ids[2:]), self.mpk[0])

    def test_partial_signature_verifies_under_public_share(self):
        public_share = PublicKey.evaluate(self.mpk, self.ids[1])
        self.assertTrue(self.partials[1].verify(public_share, self.message))
        self.assertFalse(self.partials[2].verify(public_share, self.message))

    def test_no_sharing(self):
        secret = SecretKey(Scalar(31337))
        msk = (secret,)
        pk = get_master_public_key(msk)[0]
        for index in (1, 2, 99):
            share = SecretKey.evaluate(msk, ID.from_index(index))
            self.assertEqual(share, secret)
            self.assertEqual(share.sign(self.message), secret.sign(self.message))
        self.assertTrue(secret.sign(self.message).verify(pk, self.message))

    def test_multi_signature_aggregation(self):
        # Plain BLS aggregation of independent keys, not threshold recovery
        keys = [SecretKey(Scalar(k)) for k in (101, 202, 303)]
        aggregate_signature = Signature.aggregate(k.sign(self.message) for k in keys)
        aggregate_public_key = PublicKey.aggregate(k.get_public_key() for k in keys)
        self.assertEqual(aggregate_signature, SecretKey.aggregate(keys).sign(self.message))
        self.assertTrue(aggregate_signature.verify(aggregate_public_key, self.message))
        self.assertNotEqual(
            aggregate_signature, Signature.recover([k.sign(self.message) for k in keys], self.ids[:3])
        )


class TestDealer(unittest.TestCase):
    def setUp(self):
        data = bytes(range(256)) * ((3 * RANDOM_SCALAR_SIZE) // 256 + 1)
        self.dealer = Dealer(3, 5, StreamRandomSource(io.BytesIO(data)))
        self.dealer.init_keygen()
        self.participants = self.dealer.deal()
        self.message = b"hello"

    def test_dealer_arguments(self):
        with self.assertRaises(InvalidInput):
            Dealer(0, 3)
        with self.assertRaises(InvalidInput):
            Dealer(4, 3)
        with self.assertRaises(InvalidInput):
            Dealer(2, "3")

    def test_deal_forgets_master_secret_key(self):
        self.assertIsNone(self.dealer.master_secret_key)
        with self.assertRaises(ValueError):
            self.dealer.generate_shares()

    def test_dealer_with_given_secret(self):
        secret = SecretKey(Scalar(424242))
        dealer = Dealer(2, 3)
        dealer.init_keygen(secret)
        self.assertEqual(dealer.public_key, secret.get_public_key())
        shares = dealer.generate_shares()
        self.assertEqual(SecretKey.recover(shares[1:], dealer.ids[1:]), secret)

    def test_participants_verify_shares(self):
        self.assertEqual([p.index for p in self.participants], [1, 2, 3, 4, 5])
        for participant, public_share in zip(
            self.participants, self.dealer.public_key_shares()
        ):
            self.assertTrue(participant.verify_share(self.dealer.master_public_key))
            self.assertEqual(participant.public_key_share(), public_share)

    def test_participant_rejects_wrong_commitment_count(self):
        with self.assertRaises(InvalidInput):
            self.participants[0].verify_share(self.dealer.master_public_key[:2])

    def test_tampered_share_fails_verification(self):
        p = self.participants[0]
        p.secret_key_share = p.secret_key_share + SecretKey(Scalar(1))
        self.assertFalse(p.verify_share(self.dealer.master_public_key))

    def test_aggregator(self):
        agg = Aggregator(
            self.dealer.public_key,
            self.message,
            3,
            self.dealer.master_public_key,
        )
        for p in (self.participants[4], self.participants[0], self.participants[2]):
            self.assertTrue(agg.add_partial_signature(p.id, p.sign(self.message)))
        signature = agg.signature()
        self.assertTrue(signature.verify(self.dealer.public_key, self.message))

    def test_aggregator_rejects_bad_partial(self):
        agg = Aggregator(
            self.dealer.public_key,
            self.message,
            3,
            self.dealer.master_public_key,
        )
        p1, p2 = self.participants[:2]
        self.assertFalse(agg.add_partial_signature(p1.id, p2.sign(self.message)))
        self.assertNotIn(p1.id, agg.partial_signatures)
        with self.assertRaises(InvalidInput):
            agg.signature()

    def test_aggregator_duplicate(self):
        agg = Aggregator(self.dealer.public_key, self.message, 3)
        p = self.participants[0]
        agg.add_partial_signature(p.id, p.sign(self.message))
        with self.assertRaises(DuplicateIdentity):
            agg.add_partial_signature(p.id, p.sign(self.message))

    def test_aggregator_unchecked_bad_partial(self):
        agg = Aggregator(self.dealer.public_key, self.message, 3)
        for p in self.participants[:2]:
            agg.add_partial_signature(p.id, p.sign(self.message))
        p3 = self.participants[2]
        agg.add_partial_signature(p3.id, p3.sign(b"something else"))
        with self.assertRaises(InvalidInput):
            agg.signature()


if __name__ == "__main__":
    unittest.main()
