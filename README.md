# zlspectrum

Building blocks for real-time spectrum analysis and equalizer interface state,
written in Python on top of NumPy.

## Modules

- `zlspectrum.decibels`: `decibels_to_gain`, `gain_to_decibels` (gain floored
  at 1e-12) and `square_gain_to_decibels` (power floored at 1e-24). Each takes
  a number or an array.
- `zlspectrum.smoothing`: `SmoothedValue`, a value ramped towards a target one
  step per `get_next()` call. `SmoothedType` chooses a linear or exponential
  ramp over a fixed length (`LIN`, `MUL`) or a fixed-rate ramp clamped at the
  target (`FIX_LIN`, `FIX_MUL`).
- `zlspectrum.gain`: `Gain`, a multiplicatively smoothed gain applied in place
  to a list of channel arrays with `process(buffer, num_samples, bypass=False)`.
- `zlspectrum.ms_splitter`: `split` and `combine` convert left/right arrays to
  mid/side and back, in place; `GainMode` (`PRE`, `AVG`, `POST`) chooses where
  the scaling is applied.
- `zlspectrum.makima`: `SeqMakima`, a modified Akima spline with fixed end
  derivatives. Call `prepare()` after the input values change, then
  `eval(x)` on increasing points; values outside the input range are held at
  the end values.
- `zlspectrum.fifo`: `AbstractFifo`, read/write index bookkeeping for a
  single-producer, single-consumer ring buffer, returning `FifoRange` blocks.
- `zlspectrum.circular_buffer`: `CircularBuffer`, a double-ended ring buffer
  with power-of-two storage that drops from the other end when full.
- `zlspectrum.fft`: `FFTEngine` (real FFT of size `2 ** order`, unnormalised
  inverse, magnitudes) and `cyclic_hanning_window`.
- `zlspectrum.collision`: `create_gradient_ps` marks the frequency regions
  where two spectra in decibels are both loud; also `softmax_average` and
  `harmonic_mean`.
- `zlspectrum.multi_fft`: `MultipleFFTBase`, several time-aligned analyzers
  with level decay, freezing, a stereo mode (`FFTStereoMode`), interpolation
  onto a logarithmic frequency grid and a dB/octave tilt.
- `zlspectrum.multi_avg_fft`: `MultipleAvgFFTBase`, the same analyzers but
  reporting the average power since the last reset.
- `zlspectrum.analyzer`: `MultipleFFTAnalyzer`, which adds
  `create_path_xs(width)` and `create_path_ys(height, min_db, max_db)` to turn
  levels into drawing coordinates (`None` for disabled analyzers).
- `zlspectrum.parameters`: parameter definitions (`FloatParameter`,
  `BoolParameter`, `ChoiceParameter`, `IntParameter`, `NormalisableRange`),
  the layouts `na_parameter_layout()` and `state_parameter_layout()`, and
  `ParameterLayout.defaults()` giving every default keyed by id.
- `zlspectrum.ui_settings`: `UISettings` holds colours (`Colour`), fonts and
  input sensitivities, and `load`s/`save`s them from/to a mapping of
  parameter ids to floats.
- `zlspectrum.property_file`: `PropertyFile` loads and saves such a mapping to
  `ZL Audio/ZL Spectrum Equalizer/ui.xml` in the per-user application data
  folder (or under `base_dir`), moving a file from the older
  `Audio/Presets/...` location the first time it is needed.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import numpy as np
from zlspectrum.analyzer import MultipleFFTAnalyzer

analyzer = MultipleFFTAnalyzer(fft_num=2, point_num=200)
analyzer.prepare(48000.0, [2, 2])
analyzer.set_on(0, True)

block = np.random.default_rng(0).standard_normal((2, 512))
analyzer.process([block, block], 512)
analyzer.run()

xs = analyzer.create_path_xs(800.0)
ys = analyzer.create_path_ys(400.0, -72.0, 0.0)
```

Keeping interface settings between sessions:

```python
from zlspectrum.parameters import state_parameter_layout
from zlspectrum.property_file import PropertyFile
from zlspectrum.ui_settings import UISettings

state = state_parameter_layout().defaults()
store = PropertyFile(state)          # reads ui.xml into state if it has values
settings = UISettings()
settings.load(state)
settings.font_scale = 0.8
settings.save(state)
store.save(state)
```

## What it does not do

The package is a library only. It has no command-line tool, opens no audio
devices, draws no interface and applies no equalization: it analyses sample
arrays you pass in and keeps settings in plain mappings.