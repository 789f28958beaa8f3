from erasure.sequence import TypedSequence
from erasure.types import StringType

strings = TypedSequence(StringType())
strings.append("string value 1")
strings.append(5)    # rejected by the checked path
