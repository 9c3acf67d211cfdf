# -*- coding: utf-8 -*-
"""
Slicer Orchestrator
===================
Main entry point for the slicing pipeline.
Coordinating GeometryKernel -> Raster / ContourOps + Hatch -> G-code.

Both print strategies share one layer loop; they differ only in what a
non-empty layer turns into:

- LCDProfile : one PNG mask per layer plus a projection command.
- SLAProfile : contour traversals and a boustrophedon hatch per layer.

The program is produced lazily. Nothing is written (and the mesh is not
touched) until the first instruction is requested.
"""

import logging
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterator, List, Optional

from tqdm import tqdm

from ..build_prep.process_profile import LCDProfile, PrintProfile, SLAProfile, validate_profile
from ..default_config import DEFAULTS
from ..errors import ConfigError
from ..file_parser.mesh_data import MeshData
from ..file_parser.workspace_utils import ensure_directory
from ..gcode.instruction import (
    ABSOLUTE_POSITIONING,
    DWELL,
    HOME,
    LASER_OFF,
    LASER_ON,
    LINEAR_MOVE,
    PROGRAM_END,
    PROJECT_MASK,
    RAPID_MOVE,
    UNITS_MM,
    Instruction,
    format_number,
)
from ..gcode.writer import write_program
from ..geometry_kernel.bounds import compute_bounds
from ..geometry_kernel.config import Z_EPS
from ..geometry_kernel.contour_ops import compensate_beam, stitch_segments
from ..geometry_kernel.geom_kernel import GeometryKernel, Layer, layer_count
from ..geometry_kernel.primitives import Polygon
from ..geometry_kernel.transforms import centering_offset, fit_to_build_area
from ..image.codec_interface import IImageCodec
from ..path_planner.hatch import generate_hatch
from ..raster.rasterizer import rasterize

LCD_TITLE = "**** MSLA Print ****"
SLA_TITLE = "**** SLA Laser Print ****"


def mask_file_name(mask_index: int) -> str:
    """Zero-padded mask name, e.g. 00007.png."""
    return f"{mask_index:0{DEFAULTS['MASK_NAME_WIDTH']}d}{DEFAULTS['MASK_SUFFIX']}"


class Slicer:
    """
    Slicer Orchestrator.

    Attributes:
        mesh (MeshData): Model to print; scaled in place by the LCD strategy.
        profile (PrintProfile): Validated machine/process settings.
        codec (IImageCodec): Mask encoder (LCD only).
        progress (bool): Show a tqdm bar over layers.
        workers (int): Slicing threads; 1 slices inline.
    """

    def __init__(
        self,
        mesh: MeshData,
        profile: PrintProfile,
        codec: Optional[IImageCodec] = None,
        progress: bool = False,
        workers: int = 1,
    ):
        validate_profile(profile)
        if workers < 1:
            raise ConfigError(f"workers must be at least 1, got {workers}")

        self.mesh = mesh
        self.profile = profile
        self.codec = codec
        self.progress = progress
        self.workers = workers
        self.logger = logging.getLogger("Slicer")

    def generate(self) -> Iterator[Instruction]:
        """Return the lazy instruction stream for the configured profile."""
        if isinstance(self.profile, LCDProfile):
            return self._lcd_program()
        return self._sla_program()

    # ============================================================
    #                  Shared skeleton
    # ============================================================

    def _sliced_layers(self, kernel: GeometryKernel, layer_height: float) -> Iterator[Layer]:
        """Yield sliced layers in ascending Z, on a thread pool when workers > 1."""
        layers = list(kernel.layer_planes(layer_height))
        self.logger.info(f"Slicing {len(layers)} layers with layer_height={layer_height}mm")

        bar = tqdm(total=len(layers), desc="Slicing", unit="layer", disable=not self.progress)
        try:
            if self.workers > 1 and len(layers) > 1:
                yield from self._threaded(kernel, layers, bar)
            else:
                for layer in layers:
                    kernel.slice_layer(layer)
                    bar.update(1)
                    yield layer
        finally:
            bar.close()

    def _threaded(self, kernel: GeometryKernel, layers: List[Layer], bar: tqdm) -> Iterator[Layer]:
        """Slice on a pool with at most 2 * workers layers in flight, emitting in Z order."""
        window = self.workers * 2
        pending = iter(layers)
        in_flight = deque()
        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            try:
                for layer in pending:
                    in_flight.append(pool.submit(kernel.slice_layer, layer))
                    if len(in_flight) >= window:
                        break
                while in_flight:
                    future = in_flight.popleft()
                    layer = next(pending, None)
                    if layer is not None:
                        in_flight.append(pool.submit(kernel.slice_layer, layer))
                    result = future.result()
                    bar.update(1)
                    yield result
            finally:
                # an abandoned stream only waits for work already running
                for future in in_flight:
                    future.cancel()

    @staticmethod
    def _header(title: str, notes: List[str]) -> Iterator[Instruction]:
        yield Instruction.note(title)
        yield Instruction.cmd(ABSOLUTE_POSITIONING)
        yield Instruction.cmd(UNITS_MM)
        yield Instruction.cmd(HOME)
        for text in notes:
            yield Instruction.note(text)

    @staticmethod
    def _footer(top_z: float, final_lift_mm: float, z_feed_rate: float, laser: bool) -> Iterator[Instruction]:
        if abs(final_lift_mm) > Z_EPS:
            yield Instruction.cmd(LINEAR_MOVE, Z=top_z + final_lift_mm, F=z_feed_rate)
        if laser:
            yield Instruction.cmd(LASER_OFF)
        yield Instruction.cmd(PROGRAM_END)

    # ============================================================
    #                  Mask projection (LCD / MSLA)
    # ============================================================

    def _lcd_program(self) -> Iterator[Instruction]:
        p: LCDProfile = self.profile
        codec = self.codec if self.codec is not None else IImageCodec.create()
        png_dir = ensure_directory(p.png_dir)

        bounds = compute_bounds(self.mesh)
        factor, bounds = fit_to_build_area(
            self.mesh, bounds, p.build_width, p.build_height, p.padding_percentage
        )
        offset = tuple(float(v) for v in centering_offset(bounds, p.build_width, p.build_height))
        kernel = GeometryKernel(self.mesh, bounds)
        total = layer_count(bounds, p.layer_height)

        yield from self._header(LCD_TITLE, [
            f"Resolution: {p.cols}x{p.rows} px, pitch {format_number(p.pixel_pitch)} mm",
            f"Layer height: {format_number(p.layer_height)} mm",
            f"Layers: {total}",
            f"Scale factor: {format_number(factor)}",
        ])

        mask_index = 0
        top_z = 0.0
        for layer in self._sliced_layers(kernel, p.layer_height):
            top_z = layer.top_z
            if layer.is_empty:
                self.logger.debug(f"Layer {layer.index} at z={layer.z:.4f} is empty, skipped")
                continue

            mask = rasterize(layer.segments, p.cols, p.rows, p.pixel_pitch, offset)
            name = mask_file_name(mask_index)
            codec.encode(mask.width, mask.height, mask.to_rgba_bytes(), png_dir / name)
            self.logger.debug(f"Layer {layer.index}: {len(layer.segments)} segments, "
                              f"{mask.lit_count} px lit -> {name}")

            yield Instruction.cmd(LINEAR_MOVE, Z=top_z, F=p.z_feed_rate)
            yield Instruction.cmd(PROJECT_MASK, F=name, T=p.exposure_for(mask_index), I=p.intensity)
            mask_index += 1

        yield from self._footer(top_z, p.final_lift_mm, p.z_feed_rate, laser=False)
        yield Instruction.note(f"PNG layers stored in {png_dir}")
        self.logger.info(f"MSLA program complete: {mask_index} masks in {png_dir}")

    # ============================================================
    #                  Vector laser (SLA)
    # ============================================================

    def _sla_program(self) -> Iterator[Instruction]:
        p: SLAProfile = self.profile
        bounds = compute_bounds(self.mesh)
        kernel = GeometryKernel(self.mesh, bounds)
        total = layer_count(bounds, p.layer_height)
        pitch = p.effective_hatch_pitch

        yield from self._header(SLA_TITLE, [
            f"Spot radius: {format_number(p.spot_radius)} mm, hatch pitch {format_number(pitch)} mm",
            f"Layer height: {format_number(p.layer_height)} mm",
            f"Layers: {total}",
            f"Laser power: {format_number(p.laser_power_percentage)} %",
        ])

        exposed = 0
        top_z = 0.0
        for layer in self._sliced_layers(kernel, p.layer_height):
            top_z = layer.top_z
            if layer.is_empty:
                self.logger.debug(f"Layer {layer.index} at z={layer.z:.4f} is empty, skipped")
                continue

            yield Instruction.cmd(LINEAR_MOVE, Z=top_z, F=p.z_feed_rate)
            if p.dwell > 0.0:
                yield Instruction.cmd(DWELL, P=p.dwell)
            yield Instruction.cmd(LASER_ON, S=p.laser_s_value)

            polygons = stitch_segments(layer.segments)
            if p.beam_compensation:
                polygons = compensate_beam(polygons, p.spot_radius)
            for poly in polygons:
                yield from self._trace(poly, p)

            hatch = generate_hatch(layer.segments, pitch)
            for line in hatch:
                yield Instruction.cmd(RAPID_MOVE, X=line.start[0], Y=line.start[1], F=p.travel_feed_rate)
                yield Instruction.cmd(LINEAR_MOVE, X=line.end[0], Y=line.end[1], F=p.feed_rate)

            yield Instruction.cmd(LASER_OFF)
            exposed += 1
            self.logger.debug(f"Layer {layer.index}: {len(polygons)} contours, {len(hatch)} hatch lines")

        yield from self._footer(top_z, p.final_lift_mm, p.z_feed_rate, laser=True)
        self.logger.info(f"SLA program complete: {exposed} exposed layers")

    @staticmethod
    def _trace(poly: Polygon, p: SLAProfile) -> Iterator[Instruction]:
        """Rapid to the first point, expose through the rest, close if needed."""
        first = poly.points[0]
        yield Instruction.cmd(RAPID_MOVE, X=first[0], Y=first[1], F=p.travel_feed_rate)
        for x, y in poly.points[1:]:
            yield Instruction.cmd(LINEAR_MOVE, X=x, Y=y, F=p.feed_rate)
        if poly.closed:
            yield Instruction.cmd(LINEAR_MOVE, X=first[0], Y=first[1], F=p.feed_rate)


def generate_gcode(
    mesh: MeshData,
    profile: PrintProfile,
    codec: Optional[IImageCodec] = None,
    progress: bool = False,
    workers: int = 1,
) -> Iterator[Instruction]:
    """
    Build the print program for ``mesh``.

    The profile is validated before this returns, so a ConfigError never
    follows a partially consumed stream. Everything else happens lazily
    while the returned iterator is consumed.

    Args:
        mesh: Parsed model. The LCD strategy scales it in place.
        profile: LCDProfile or SLAProfile.
        codec: Mask encoder; Pillow PNG when omitted.
        progress: Show a progress bar over layers.
        workers: Number of slicing threads.

    Returns:
        Single-pass iterator of Instructions in ascending Z.

    Raises:
        ConfigError: Invalid profile or worker count.
    """
    return Slicer(mesh, profile, codec=codec, progress=progress, workers=workers).generate()


def slice_to_file(
    mesh: MeshData,
    profile: PrintProfile,
    path,
    codec: Optional[IImageCodec] = None,
    progress: bool = False,
    workers: int = 1,
) -> Path:
    """Generate the program and write it atomically to ``path``."""
    write_program(generate_gcode(mesh, profile, codec, progress, workers), path)
    return Path(path)
