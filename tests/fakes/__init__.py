from tests.fakes.fake_generator import FakeTextGenerator
from tests.fakes.fake_record_store import FailingRecordStore

__all__ = ["FakeTextGenerator", "FailingRecordStore"]
