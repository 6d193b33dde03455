"""Create farms, animals, reproduction and selection tables

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- farms ---
    op.create_table(
        'farms',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('repro_mode', sa.String(length=16), nullable=False, server_default='CONTINUO'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_farms'),
    )

    # --- farm_repro_configs ---
    op.create_table(
        'farm_repro_configs',
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('open_days_warning', sa.Integer(), nullable=True),
        sa.Column('open_days_critical', sa.Integer(), nullable=True),
        sa.Column('iep_warning', sa.Integer(), nullable=True),
        sa.Column('iep_critical', sa.Integer(), nullable=True),
        sa.Column('open_days_severe', sa.Integer(), nullable=True),
        sa.Column('iep_severe', sa.Integer(), nullable=True),
        sa.Column('diagnosis_window_days', sa.Integer(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['farm_id'], ['farms.id'], name='fk_farm_repro_configs_farm_id_farms'),
        sa.PrimaryKeyConstraint('farm_id', name='pk_farm_repro_configs'),
    )

    # --- animals ---
    op.create_table(
        'animals',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('tag', sa.String(length=64), nullable=False),
        sa.Column('sex', sa.String(length=8), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('registry', sa.String(length=64), nullable=True),
        sa.Column('breed', sa.String(length=128), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('lot_id', sa.Uuid(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['farm_id'], ['farms.id'], name='fk_animals_farm_id_farms'),
        sa.PrimaryKeyConstraint('id', name='pk_animals'),
        sa.UniqueConstraint('farm_id', 'tag', name='ux_animals_farm_tag'),
    )
    op.create_index('ix_animals_farm_sex', 'animals', ['farm_id', 'sex'], unique=False)

    # --- breeding_seasons ---
    op.create_table(
        'breeding_seasons',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('start_at', sa.Date(), nullable=False),
        sa.Column('end_at', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['farm_id'], ['farms.id'], name='fk_breeding_seasons_farm_id_farms'),
        sa.PrimaryKeyConstraint('id', name='pk_breeding_seasons'),
    )
    op.create_index(
        'ix_breeding_seasons_farm_id', 'breeding_seasons', ['farm_id'], unique=False
    )

    # --- season_exposures ---
    op.create_table(
        'season_exposures',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('season_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(
            ['season_id'], ['breeding_seasons.id'],
            name='fk_season_exposures_season_id_breeding_seasons',
        ),
        sa.ForeignKeyConstraint(['animal_id'], ['animals.id'], name='fk_season_exposures_animal_id_animals'),
        sa.PrimaryKeyConstraint('id', name='pk_season_exposures'),
        sa.UniqueConstraint('season_id', 'animal_id', name='ux_season_exposures_season_animal'),
    )

    # --- repro_events ---
    op.create_table(
        'repro_events',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('season_id', sa.Uuid(), nullable=True),
        sa.Column('type', sa.String(length=32), nullable=False),
        sa.Column('event_date', sa.Date(), nullable=False),
        sa.Column('payload', sa.JSON(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['farm_id'], ['farms.id'], name='fk_repro_events_farm_id_farms'),
        sa.ForeignKeyConstraint(['animal_id'], ['animals.id'], name='fk_repro_events_animal_id_animals'),
        sa.ForeignKeyConstraint(
            ['season_id'], ['breeding_seasons.id'],
            name='fk_repro_events_season_id_breeding_seasons',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_repro_events'),
    )
    op.create_index(
        'ix_repro_events_farm_animal_date',
        'repro_events',
        ['farm_id', 'animal_id', 'event_date'],
        unique=False,
    )
    op.create_index('ix_repro_events_season', 'repro_events', ['season_id'], unique=False)

    # --- selection_decisions ---
    op.create_table(
        'selection_decisions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('decision', sa.String(length=16), nullable=False),
        sa.Column('reason', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['farm_id'], ['farms.id'], name='fk_selection_decisions_farm_id_farms'),
        sa.ForeignKeyConstraint(
            ['animal_id'], ['animals.id'], name='fk_selection_decisions_animal_id_animals'
        ),
        sa.PrimaryKeyConstraint('id', name='pk_selection_decisions'),
        sa.UniqueConstraint('farm_id', 'animal_id', name='ux_selection_decisions_farm_animal'),
    )
    op.create_index(
        'ix_selection_decisions_farm_updated',
        'selection_decisions',
        ['farm_id', 'updated_at'],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index('ix_selection_decisions_farm_updated', table_name='selection_decisions')
    op.drop_table('selection_decisions')
    op.drop_index('ix_repro_events_season', table_name='repro_events')
    op.drop_index('ix_repro_events_farm_animal_date', table_name='repro_events')
    op.drop_table('repro_events')
    op.drop_table('season_exposures')
    op.drop_index('ix_breeding_seasons_farm_id', table_name='breeding_seasons')
    op.drop_table('breeding_seasons')
    op.drop_index('ix_animals_farm_sex', table_name='animals')
    op.drop_table('animals')
    op.drop_table('farm_repro_configs')
    op.drop_table('farms')
