"""
International Standard Atmosphere, SI units

Atmospheric properties as a function of geometric altitude for the
skydiving envelope (exit altitude down to the ground):
- Temperature (K)
- Pressure (Pa)
- Density (kg/m^3)
- Speed of sound (m/s)
"""

import numpy as np

G0 = 9.80665  # m/s^2


class StandardAtmosphere:
    """
    ISA model from sea level to 32 km.

    Parameters
    ----------
    altitude : float
        Geometric altitude in meters above MSL

    Attributes
    ----------
    temperature : float
        Static temperature (K)
    pressure : float
        Static pressure (Pa)
    density : float
        Air density (kg/m^3)
    speed_of_sound : float
        Speed of sound (m/s)

    Notes
    -----
    Layers:
    - Troposphere: 0 - 11,000 m, -6.5 K/km
    - Tropopause: 11,000 - 20,000 m, isothermal
    - Stratosphere: 20,000 - 32,000 m, +1.0 K/km

    Altitudes below sea level use the troposphere profile; altitudes above
    32 km are clamped.
    """

    T0 = 288.15      # K
    P0 = 101325.0    # Pa
    rho0 = 1.225     # kg/m^3

    R = 287.05287    # J/(kg*K)
    gamma = 1.4

    h_trop = 11000.0
    h_strat1 = 20000.0
    h_max = 32000.0

    lapse_trop = -0.0065    # K/m
    lapse_strat2 = 0.001    # K/m

    def __init__(self, altitude: float = 0.0):
        self.altitude = altitude
        self._compute_properties()

    def _compute_properties(self):
        h = min(self.altitude, self.h_max)

        T_trop = self.T0 + self.lapse_trop * self.h_trop
        P_trop = self.P0 * (T_trop / self.T0) ** (-G0 / (self.lapse_trop * self.R))

        if h <= self.h_trop:
            self.temperature = self.T0 + self.lapse_trop * h
            self.pressure = self.P0 * (self.temperature / self.T0) ** (-G0 / (self.lapse_trop * self.R))

        elif h <= self.h_strat1:
            self.temperature = T_trop
            self.pressure = P_trop * np.exp(-G0 * (h - self.h_trop) / (self.R * T_trop))

        else:
            P_strat1 = P_trop * np.exp(-G0 * (self.h_strat1 - self.h_trop) / (self.R * T_trop))
            self.temperature = T_trop + self.lapse_strat2 * (h - self.h_strat1)
            self.pressure = P_strat1 * (self.temperature / T_trop) ** (-G0 / (self.lapse_strat2 * self.R))

        self.density = self.pressure / (self.R * self.temperature)
        self.speed_of_sound = np.sqrt(self.gamma * self.R * self.temperature)

    def update(self, altitude: float):
        """Recompute properties at a new altitude (m)."""
        self.altitude = altitude
        self._compute_properties()

    def get_properties(self) -> dict:
        return {
            'altitude': self.altitude,
            'temperature': self.temperature,
            'pressure': self.pressure,
            'density': self.density,
            'speed_of_sound': self.speed_of_sound,
            'temperature_C': self.temperature - 273.15,
            'density_ratio': self.density / self.rho0,
        }

    def get_dynamic_pressure(self, velocity: float) -> float:
        """q = 0.5 * rho * V^2 (Pa) for a true airspeed in m/s."""
        return 0.5 * self.density * velocity ** 2

    def get_mach_number(self, velocity: float) -> float:
        return velocity / self.speed_of_sound

    def true_to_equivalent_airspeed(self, velocity: float) -> float:
        """EAS = TAS * sqrt(rho / rho0)."""
        return velocity * np.sqrt(self.density / self.rho0)

    def __repr__(self):
        return (f"StandardAtmosphere(altitude={self.altitude:.0f} m, "
                f"T={self.temperature - 273.15:.1f} C, "
                f"P={self.pressure / 100:.1f} hPa, "
                f"rho={self.density:.4f} kg/m^3)")

    @staticmethod
    def get_density_altitude(density: float) -> float:
        """Troposphere altitude (m) with the given density."""
        sigma = density / StandardAtmosphere.rho0
        exponent = -StandardAtmosphere.lapse_trop * StandardAtmosphere.R / (
            G0 + StandardAtmosphere.lapse_trop * StandardAtmosphere.R)
        return StandardAtmosphere.T0 / (-StandardAtmosphere.lapse_trop) * (1 - sigma ** exponent)


def density_at(altitude: float) -> float:
    """ISA air density (kg/m^3) at a geometric altitude (m)."""
    return float(StandardAtmosphere(altitude).density)


if __name__ == "__main__":
    print(f"{'Alt (m)':<10} {'T (C)':<10} {'P (hPa)':<12} {'rho (kg/m3)':<14} {'a (m/s)':<10}")
    print("-" * 56)
    for alt in [0, 1000, 2000, 4000, 11000, 15000]:
        props = StandardAtmosphere(alt).get_properties()
        print(f"{alt:<10.0f} {props['temperature_C']:<10.1f} {props['pressure'] / 100:<12.1f} "
              f"{props['density']:<14.4f} {props['speed_of_sound']:<10.1f}")
