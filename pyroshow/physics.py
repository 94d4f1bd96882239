#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""
Particle physics kernel.

A first order (semi-implicit Euler) integrator under uniform
gravity along -y, plus the direction samplers shared by the
effect generators. Samplers always take an explicit generator so
that every effect stays reproducible from its instance seed.
"""
import math
from dataclasses import dataclass

import numpy as np


GRAVITY = -9.8


@dataclass
class Particle:
    """A single simulated particle."""

    position: list
    velocity: list
    color: tuple
    age: float = 0.0
    max_life: float = 1.0
    size: float = 1.0
    alive: bool = True

    @property
    def life(self) -> float:
        """Remaining life in seconds."""
        return max(0.0, self.max_life - self.age)

    @property
    def life_fraction(self) -> float:
        """Remaining life as a fraction of max_life (0.0 - 1.0)."""
        if self.max_life <= 0:
            return 0.0
        return self.life / self.max_life


def create_particle(position, velocity, color, life: float=1.0, size: float=1.0) -> Particle:
    """
    Create a live particle

    :param position: starting position (x, y, z)
    :param velocity: starting velocity (x, y, z)
    :param color: RGB float tuple
    :param life: lifetime in seconds
    :param size: nominal size
    """
    return Particle(position=list(position), velocity=list(velocity),
                    color=tuple(color), age=0.0, max_life=life, size=size,
                    alive=life > 0)


def integrate(particle: Particle, dt: float, gravity: float=GRAVITY) -> Particle:
    """
    Advance a particle by dt seconds

    The particle ages first; once no life remains it is marked dead
    and not moved. Otherwise gravity is applied to the velocity and
    the new velocity moves the position.

    :return: the same particle, mutated
    """
    if not particle.alive:
        return particle

    particle.age += dt
    if particle.max_life - particle.age <= 0:
        particle.alive = False
        return particle

    vel = particle.velocity
    pos = particle.position
    vel[1] += gravity * dt
    pos[0] += vel[0] * dt
    pos[1] += vel[1] * dt
    pos[2] += vel[2] * dt
    return particle


def filter_alive(particles: list) -> list:
    """
    Drop dead particles
    """
    return [p for p in particles if p.alive]


def step(particles: list, dt: float, gravity: float=GRAVITY) -> list:
    """
    Integrate every particle and return the survivors
    """
    for particle in particles:
        integrate(particle, dt, gravity)
    return filter_alive(particles)


def random_direction(rng: np.random.Generator) -> tuple:
    """
    Uniformly distributed unit vector on the sphere
    """
    theta = rng.random() * 2.0 * math.pi
    phi = math.acos(2.0 * rng.random() - 1.0)
    return (math.sin(phi) * math.cos(theta),
            math.sin(phi) * math.sin(theta),
            math.cos(phi))


def random_in_cone(rng: np.random.Generator, angle: float) -> tuple:
    """
    Unit vector within angle radians of +y
    """
    theta = rng.random() * 2.0 * math.pi
    phi = rng.random() * angle
    return (math.sin(phi) * math.cos(theta),
            math.cos(phi),
            math.sin(phi) * math.sin(theta))


def sphere_directions(rng: np.random.Generator, count: int,
                      upper: bool=False) -> np.ndarray:
    """
    Vectorized uniform unit vectors

    :param rng: random generator
    :param count: number of vectors
    :param upper: restrict to the upper hemisphere (y >= 0)

    :return: (count, 3) array
    """
    theta = rng.random(count) * 2.0 * np.pi
    if upper:
        cos_phi = rng.random(count)
    else:
        cos_phi = 2.0 * rng.random(count) - 1.0
    sin_phi = np.sqrt(1.0 - cos_phi * cos_phi)
    return np.stack((sin_phi * np.cos(theta), cos_phi, sin_phi * np.sin(theta)), axis=1)


def ballistic_positions(origin, velocities: np.ndarray, t, air: float, k,
                        gravity=GRAVITY) -> np.ndarray:
    """
    Closed-form position under exponential air drag and gravity

        p(t) = origin + v * t * air^(t * k) + 1/2 * gravity * t^2 * y

    :param origin: (3,) or (N, 3) start positions
    :param velocities: (N, 3) initial velocities
    :param t: elapsed time, scalar or (N,) array
    :param air: air resistance base (0 - 1)
    :param k: drag rate, scalar or (N,) array
    :param gravity: vertical acceleration, scalar or (N,) array

    :return: (N, 3) array of positions
    """
    t = np.asarray(t, dtype=np.float64)
    drag = np.power(air, t * np.asarray(k, dtype=np.float64))
    travel = (t * drag)
    if travel.ndim > 0:
        travel = travel[:, np.newaxis]

    positions = np.asarray(origin, dtype=np.float64) + velocities * travel
    positions[:, 1] += 0.5 * np.asarray(gravity, dtype=np.float64) * t * t
    return positions
