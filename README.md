# tadlab

`tadlab` collects classic data-structure exercises in one small Python package
with no runtime dependencies.

## Contents

**Recursion** (`tadlab.recursividad`): `es_palindromo`, `producto` (repeated
addition), `fibonacci` (terms 0 and 1 are both 1), `division` (repeated
subtraction), `validar_numero` and `agregar_separador_miles` (a `.` between
groups of three digits), `reunion_mafia`, `validar_onda` and `onda_digital`
(drawing an H/L wave), `subconjuntos_que_suman`, `divisible_por_7` and
`explosion`.

**Bounded abstract data types**, all holding `Elemento` values
(`tadlab.elemento`): an integer `clave` with an optional `valor`. A bare integer
given to any of them is wrapped in an `Elemento`.

* `Lista` (`tadlab.listas`): `agregar`, `borrar`, `buscar`, `insertar`,
  `eliminar`, `recuperar` with 1-based positions, plus `claves()`, `len()` and
  iteration.
* `Pila` (`tadlab.pilas`): `apilar`, `desapilar`, `tope`; iteration and
  `claves()` go from the top down.
* `Cola` (`tadlab.colas`): `encolar`, `desencolar`, `recuperar` (the front);
  iteration and `claves()` go front to back.

Each has a capacity (100 by default). Adding to a full structure raises
`EstructuraLlenaError`; taking from an empty stack or queue raises
`EstructuraVaciaError`.

**Algorithms on those types**:

* `tadlab.operaciones_listas`: `valores_no_en_lista`, `valores_comunes`,
  `promedio_lista`, `valor_max` (value and 1-based position),
  `comparar_listas` (returns a `Relacion`; lists of different length raise
  `ValueError`) and `es_sublista`.
* `tadlab.multiplos`: `es_multiplo_con_escalar`, returning
  `(es_multiplo, escalar)`.
* `tadlab.polinomio`: `formar_polinomio`, `calcular_polinomio` and
  `calcular_intervalo`, which returns `ResultadoFuncion` values.
* `tadlab.operaciones_pilas`: `pila_aleatoria`, `existe_clave`,
  `colocar_elemento`, `eliminar_clave`, `intercambiar_posiciones`,
  `duplicar_contenido`, `cantidad_elementos`, `pilas_iguales` and
  `cambiar_base` (bases 2 to 16).
* `tadlab.analisis_pilas`: `invertir`, `eliminar_ocurrencias` (recursive),
  `eliminar_ocurrencias_iterativo`, `elementos_comunes` and `sacar_repetidos`
  (each key once, with its count as `valor`).
* `tadlab.operaciones_colas`: `cola_aleatoria`, `existe_clave`,
  `colar_elemento`, `sacar_elemento`, `contar_elementos`, `copiar` and
  `invertir`.
* `tadlab.analisis_colas`: `colas_iguales`, `cola_no_repetidos` and
  `divisor_total`, returning `(divisor, fue_total)`.
* `tadlab.comunes_pila_cola`: `comunes_pila_y_cola`, returning `Coincidencia`
  values with the key and its positions in the stack and in the queue.
* `tadlab.atencion`: `atender_clientes`, a round-robin simulation of one clerk
  serving three queues, returning `Atencion` values in service order.

Functions that only read a structure leave it as it was found. On stacks,
`colocar_elemento`, `eliminar_clave` and `intercambiar_posiciones` change the
given stack in place and return it; the other operations build new structures.

## Examples

```python
from tadlab.recursividad import explosion, reunion_mafia, divisible_por_7
from tadlab.operaciones_pilas import cambiar_base
from tadlab.colas import Cola
from tadlab.atencion import atender_clientes

explosion(10, 3)          # [3, 2, 1, 1, 3]
reunion_mafia(2)          # "(-.(-.-).-)"
divisible_por_7(32291)    # True
cambiar_base(255, 16)     # "FF"

orden = atender_clientes(Cola([40, 20, 30]), Cola([20, 10]), Cola([10, 10, 10]), 10)
[str(a) for a in orden][:2]   # ['Cliente 1 Cola 3', 'Cliente 1 Cola 2']
```

## What it does not do

`tadlab` is a library only. It has no command-line program and no interactive
menus for typing in values; structures are built and inspected from Python
code.

The package needs Python 3.10 or later.