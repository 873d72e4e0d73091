"""
# `pitchnotation`: Pitch and Interval Strings in Array Notation

Converts scientific pitch names (`"C#4"`, `"Bbb"`) and interval / scale degree names
(`"3M"`, `"-9m"`, `"5b"`) to and from a compact array notation:

- pitch class `[step, acci]`
- pitch `[step, acci, octave, 0]`
- interval `[simple, acci, octave]`

```python
import pitchnotation as pn

pn.convert("C#4")  # Pitch(step=0, acci=1, octave=4, reserved=0)
pn.convert([2, 0, 1])  # "10M"
```
"""

from ._impl import *  # noqa: F401, F403
