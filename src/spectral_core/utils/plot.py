import os

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np


def plot_interpolation(original, interpolated, save_path):
    """Plot original samples and the interpft result on one periodic time axis."""
    original = np.real(np.asarray(original))
    interpolated = np.real(np.asarray(interpolated))

    # Both sequences span one period [0, 1)
    t_orig = np.arange(len(original)) / len(original)
    t_interp = np.arange(len(interpolated)) / len(interpolated)

    plt.figure(figsize=(10, 6))
    plt.plot(t_interp, interpolated, '.-', label=f'interpft ({len(interpolated)} points)')
    plt.plot(t_orig, original, 'o', markersize=8, label=f'Original ({len(original)} points)')
    plt.title('FFT Interpolation')
    plt.xlabel('Normalized time')
    plt.ylabel('Amplitude')
    plt.legend()
    plt.grid(True)

    save_dir = os.path.dirname(save_path)
    if save_dir:
        os.makedirs(save_dir, exist_ok=True)
    plt.savefig(save_path, dpi=150)
    plt.close()
    return save_path
