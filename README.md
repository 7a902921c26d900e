# skyplace

A small library of positional-astronomy routines. It covers air mass, the motion of an altazimuth mount, conversion from geocentric apparent to mean place, sidereal time, the terms of a nutation series and Gregorian calendar dates. All angles are in radians. Dates are Modified Julian Dates (JD − 2400000.5). The package has no dependencies outside the standard library.

## Installation

```
pip install skyplace
```

To install it with its test dependencies:

```
pip install "skyplace[test]"
```

## Modules

### `skyplace.airmass`

`airmass(zd)` returns the relative air mass at an observed zenith distance, in units of the zenith thickness. It uses Hardie's (1962) polynomial. The sign of `zd` is ignored, and beyond 87 degrees the result is held constant.

### `skyplace.mount`

`altaz(ha, dec, phi)` takes an hour angle, a declination and a latitude and returns a frozen `AltAzMotion`. Its fields are:

- `az`, `el` and `pa`: the azimuth, the elevation and the parallactic angle.
- `azd`, `eld` and `pad`: their velocities, in radians per radian of HA.
- `azdd`, `eldd` and `padd`: their accelerations, in radians per radian of HA squared.

Azimuth runs from 0 to 2π, with north at zero and east at +π/2. Near the zenith the velocities and accelerations are clamped.

### `skyplace.vectors`

Helpers for 3-vectors, which are plain tuples:

- `spherical_to_cartesian(theta, phi)` returns a unit vector.
- `cartesian_to_spherical(v)` returns `(theta, phi)`. It gives zero wherever a value is undefined.
- `dot(a, b)` returns the scalar product.
- `normalize(v)` returns `(modulus, unit_vector)`. A null vector gives a null unit vector.
- `transpose_multiply(matrix, v)` multiplies `v` by the transpose of a 3×3 matrix.
- `normalize_angle_positive(angle)` brings an angle into the range 0 ≤ a < 2π.

### `skyplace.apparent`

`MeanToApparentParameters` holds the star-independent parameters. `MeanToApparentParameters.from_sequence(values)` builds one from the flat 21-element layout, which is, in order:

1. the time interval;
2. the Earth's barycentric position (3 values);
3. the Earth's heliocentric direction (3 values);
4. the gravitational radius factor;
5. the Earth's velocity in units of c (3 values);
6. sqrt(1 − v²);
7. the precession-nutation matrix, row by row (9 values).

It raises `ValueError` if the count is wrong.

`apparent_to_mean(ra, da, params)` returns the mean `(ra, dec)`. It inverts aberration and light deflection iteratively.

### `skyplace.calendar`

- `gregorian_to_mjd(iy, im, id)` returns the MJD at 0h of a Gregorian date, taking the year literally.
- `caldj(iy, im, id)` does the same, except that it reads the years 0–49 as 2000–2049 and 50–99 as 1950–1999.

Both raise `ValueError` if the year is before −4799, the month is outside 1–12, or the day is outside the month.

### `skyplace.sidereal`

- `gmst(ut1)` returns the Greenwich mean sidereal time, in the range 0 to 2π.
- `local_apparent_sidereal_time(date, offset)` returns `gmst(date) + offset`. Here `offset` is the longitude plus the equation of the equinoxes plus the sidereal equivalent of UT1 − UTC. The sum is not reduced to any range.

### Nutation series: `skyplace.nutation_arguments`, `skyplace.nutation_longitude` and `skyplace.nutation_obliquity`

These modules hold the 194 terms of the Shirai & Fukushima (2001) series, 32 of which are planetary terms.

In `skyplace.nutation_arguments`:

- `term_count()` returns the number of terms.
- `multipliers(index)` returns the nine integer multipliers of a term's argument.
- `argument(index, fundamentals)` combines them with nine fundamental arguments to give the term's argument. The fundamental arguments are the Moon's and the Sun's mean anomalies, F, D, Ω, and the mean longitudes of Venus, Mars, Jupiter and Saturn.

In `skyplace.nutation_longitude`:

- `longitude_coefficients(index)` returns the term's four coefficients.
- `longitude_term(index, t, theta)` returns the term's contribution to the nutation in longitude, in microarcseconds.

In `skyplace.nutation_obliquity`:

- `obliquity_coefficients(index)` returns the term's four coefficients.
- `obliquity_term(index, t, theta)` returns the term's contribution to the nutation in obliquity, in microarcseconds.

In all of these, `t` is Julian centuries from J2000. An index that is out of range raises `IndexError`.

## Example

```python
import math

from skyplace.airmass import airmass
from skyplace.calendar import caldj
from skyplace.mount import altaz
from skyplace.nutation_arguments import argument, term_count
from skyplace.nutation_longitude import longitude_term

mjd = caldj(99, 12, 31)  # 1999-12-31 -> 51543.0
print(mjd)

print(airmass(math.radians(60.0)))

motion = altaz(0.1, 0.5, math.radians(19.8))
print(motion.az, motion.el, motion.pa)

# Sum the longitude series for caller-supplied fundamental arguments.
t = (mjd - 51544.5) / 36525.0
fundamentals = [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9]
dp = sum(
    longitude_term(i, t, argument(i, fundamentals)) for i in range(term_count())
)
print(dp)  # microarcseconds
```

## What the package does not do

- It does not model atmospheric refraction or dispersion.
- It does not compute apparent-to-observed places.
- It does not compute the mean-to-apparent parameters themselves. The caller must supply them to `apparent_to_mean`.
- It does not compute the fundamental arguments of the nutation series, the summed nutation, the mean obliquity or the equation of the equinoxes. It provides the individual series terms only.
- There is no command-line program.

## Running the tests

```
pytest
```