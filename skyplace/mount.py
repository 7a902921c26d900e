"""Positions, velocities and accelerations for an altazimuth mount."""

from __future__ import annotations

import math
from dataclasses import dataclass

_TINY = 1e-30


@dataclass(frozen=True)
class AltAzMotion:
    """Azimuth, elevation and parallactic angle with their HA derivatives.

    Velocities are in radians per radian of HA, accelerations in radians
    per radian of HA squared.
    """

    az: float
    azd: float
    azdd: float
    el: float
    eld: float
    eldd: float
    pa: float
    pad: float
    padd: float


def altaz(ha: float, dec: float, phi: float) -> AltAzMotion:
    """Compute mount kinematics for hour angle, declination and latitude.

    Azimuth is in 0..2pi with north zero and east +pi/2; elevation and
    parallactic angle are in +/-pi.
    """
    sh, ch = math.sin(ha), math.cos(ha)
    sd, cd = math.sin(dec), math.cos(dec)
    sp, cp = math.sin(phi), math.cos(phi)
    chcd = ch * cd
    sdcp = sd * cp
    x = -chcd * sp + sdcp
    y = -sh * cd
    z = chcd * cp + sd * sp
    rsq = x * x + y * y
    r = math.sqrt(rsq)

    a = 0.0 if rsq == 0.0 else math.atan2(y, x)
    if a < 0.0:
        a += 2.0 * math.pi
    e = math.atan2(z, r)

    c = cd * sp - ch * sdcp
    s = sh * cp
    q = math.atan2(s, c) if c * c + s * s > 0 else math.pi - ha

    if rsq < _TINY:
        rsq = _TINY
        r = math.sqrt(rsq)
    qd = -x * cp / rsq
    ad = sp + z * qd
    ed = cp * y / r
    edr = ed / r
    add = edr * (z * sp + (2.0 - rsq) * qd)
    edd = -r * qd * ad
    qdd = edr * (sp + 2.0 * z * qd)

    return AltAzMotion(
        az=a, azd=ad, azdd=add, el=e, eld=ed, eldd=edd, pa=q, pad=qd, padd=qdd
    )