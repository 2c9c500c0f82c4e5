import unittest

from s3sign.region import EU_WEST_1, REGIONS, US_STANDARD, Region


class TestRegion(unittest.TestCase):
    def test_from_name(self):
        self.assertIs(Region.from_name("eu-west-1"), EU_WEST_1)
        with self.assertRaises(ValueError):
            Region.from_name("mars-north-1")

    def test_from_endpoint(self):
        self.assertEqual(Region.from_endpoint("s3.amazonaws.com"), US_STANDARD)
        self.assertEqual(Region.from_endpoint("s3-eu-west-1.amazonaws.com").name, "eu-west-1")
        self.assertEqual(
            Region.from_endpoint("bucket.s3.ap-south-1.amazonaws.com").name, "ap-south-1"
        )
        self.assertEqual(
            Region.from_endpoint("custom.endpoint"), Region("us-east-1", "custom.endpoint")
        )

    def test_custom(self):
        region = Region.custom("local", "localhost:9000")
        self.assertEqual(region.name, "local")
        self.assertEqual(region.endpoint, "localhost:9000")

    def test_known_regions_unique(self):
        self.assertEqual(len({r.name for r in REGIONS}), len(REGIONS))
        self.assertEqual(len({r.endpoint for r in REGIONS}), len(REGIONS))
