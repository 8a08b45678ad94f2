def get_generator(name: str):
    """Return a standardized generator callable with signature:
    gen(n_samples=..., noise_level=..., random_state=42) -> (X, Y)

    X is (n_samples, input_dim), Y is (n_samples, output_dim).
    """
    name = name.lower()
    if name in {"sine", "sin", "default"}:
        from data_gens.sine import generate_sine_data as _gen
        def _wrap_sine(n_samples=50, noise_level=0.0, random_state=42):
            return _gen(n_samples=n_samples, noise_level=noise_level, random_state=random_state)
        return _wrap_sine

    if name in {"target_1d", "chirp", "1d"}:
        from data_gens.target_functions import generate_target_1d as _gen
        def _wrap_target_1d(n_samples=30, noise_level=0.0, random_state=42):
            return _gen(n_samples=n_samples, noise_level=noise_level, random_state=random_state)
        return _wrap_target_1d

    if name in {"target_2d", "2d"}:
        from data_gens.target_functions import generate_target_2d as _gen
        def _wrap_target_2d(n_samples=400, noise_level=0.0, random_state=42):
            return _gen(n_samples=n_samples, noise_level=noise_level, random_state=random_state)
        return _wrap_target_2d

    if name in {"multi_output", "multi"}:
        from data_gens.target_functions import generate_multi_output as _gen
        def _wrap_multi(n_samples=300, noise_level=0.0, random_state=42):
            return _gen(n_samples=n_samples, noise_level=noise_level, random_state=random_state)
        return _wrap_multi

    raise ValueError(f"Unknown dataset generator name: {name}")
